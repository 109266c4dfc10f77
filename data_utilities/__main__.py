import sys

from data_utilities.cli import main

sys.exit(main())
