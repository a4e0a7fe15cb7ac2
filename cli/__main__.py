"""Console flashcard client: python -m cli [--server URL]"""

import argparse
import sys

from cli.api_client import KanaCardsAPIClient
from cli.console import ConsoleUI


def main():
    parser = argparse.ArgumentParser(
        prog='kanacards',
        description='Drill hiragana and katakana against a running kanacards server'
    )
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='kanacards server URL (default: %(default)s)'
    )
    args = parser.parse_args()

    ui = ConsoleUI(KanaCardsAPIClient(base_url=args.server))
    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nまたね!')
        sys.exit(0)


if __name__ == '__main__':
    main()
