import sys

from curvekit.cli import main

sys.exit(main())
