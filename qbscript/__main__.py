import sys

from qbscript.cli import main

sys.exit(main())
