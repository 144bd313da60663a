import sys

from blogbuild.main import main

sys.exit(main())
