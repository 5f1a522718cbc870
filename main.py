import sys
from apps.employees.scripts.manage_employees import main

if __name__ == "__main__":
    sys.exit(main())
