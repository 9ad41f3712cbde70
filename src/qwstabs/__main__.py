import sys

from qwstabs.app import main

sys.exit(main())
