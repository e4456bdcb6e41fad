import sys

from smartcalc.cli import main

sys.exit(main())
