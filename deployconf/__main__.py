import sys

from deployconf.cli import main

sys.exit(main())
