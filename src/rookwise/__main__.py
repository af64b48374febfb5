import sys

from rookwise.app import main

sys.exit(main())
