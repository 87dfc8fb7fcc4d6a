import sys

from shellsim.main import main


sys.exit(main())
