import sys

from mcpi.cli import main

sys.exit(main())
