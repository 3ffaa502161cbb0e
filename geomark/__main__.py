import sys

from geomark.cli import main

sys.exit(main())
