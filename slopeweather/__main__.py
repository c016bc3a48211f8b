import sys

from slopeweather.cli import main

sys.exit(main())
