"""
Точка входа из рабочей копии: python main.py graph.txt [-o steps.log] [--maximum] [--plot out.png]
(после установки то же самое доступно как команда hall-matching).
"""

import sys

from hall_matching.console import main

if __name__ == "__main__":
    sys.exit(main())
