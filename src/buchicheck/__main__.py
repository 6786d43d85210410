import sys

from buchicheck.cli import main

sys.exit(main())
