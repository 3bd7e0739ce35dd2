import sys

from varlang.compiler import main

sys.exit(main())
