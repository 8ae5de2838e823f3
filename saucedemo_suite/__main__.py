import sys

from saucedemo_suite.runner import main

sys.exit(main())
