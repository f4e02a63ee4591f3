import sys

from maxvalues.run import main

sys.exit(main())
