import sys

from farey_approx.cli import main

sys.exit(main())
