import sys

from grecian.cli import main

sys.exit(main())
