import sys

from sql_file_splitter.cli import main

sys.exit(main())
