import sys

from luascan.cli import main

sys.exit(main())
