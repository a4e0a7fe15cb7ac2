"""Console UI for kanacards application."""

import time

from core.config import SETTLE_DELAY_SECONDS, STUDY_MODES
from core.utils import count_strokes
from cli.api_client import KanaCardsAPIClient


class ConsoleUI:
    """Console user interface for kanacards application."""

    def __init__(self, client: KanaCardsAPIClient):
        self.client = client

    def print_card(self, state: dict):
        """Print the face of the card that is currently showing."""
        faces = state['faces']
        if not faces:
            print('\n  (no characters selected - add a group or type)\n')
            return

        print('\n' + '=' * 40)
        print(f"  {state['progress_display']}")
        print('-' * 40)
        if state['is_flipped']:
            print(f"  {faces['back']}    ({faces['back_subtext']})")
            self.print_enrichment(state)
        else:
            print(f"  {faces['front']}")
            print(f"  [{faces['front_label']}]")
            print('\n  (f to reveal)')
        print('=' * 40)

    def print_enrichment(self, state: dict):
        """Print the mnemonic block on the answer face."""
        if state['is_loading']:
            print('\n  Loading AI mnemonic...')
            return
        enrichment = state['enrichment']
        if not enrichment:
            print('\n  Answer')
            return
        print(f"\n  Mnemonic: {enrichment['mnemonic']}")
        if enrichment['examples']:
            print('  Examples:')
            for example in enrichment['examples']:
                print(f"    {example['word']}: {example['meaning']}")

    def print_selection(self, selection: dict):
        """Print the current selection."""
        print('\n' + '=' * 50)
        print('SETTINGS')
        print('=' * 50)
        print(f"Systems: {', '.join(selection['types'])}")
        print(f"Mode: {selection['study_mode']}")
        print(f"Groups: {', '.join(selection['groups'])}")
        print(f"Diacritics: {'on' if selection['has_diacritics'] else 'off'}")
        print(f"Characters in pool: {selection['pool_size']}")
        print('=' * 50 + '\n')

    def print_groups(self, groups: dict, selection: dict):
        """Print every group, marking the active ones."""
        active = set(selection['groups'])
        for group in groups['groups']:
            mark = '*' if group['id'] in active else ' '
            print(f"  [{mark}] {group['id']:<10} {group['label']}")

    def print_chart(self, chart: dict):
        """Print a reference chart, five characters per row."""
        print(f"\n{chart['type'].capitalize()}")
        items = chart['items']
        for start in range(0, len(items), 5):
            row = items[start:start + 5]
            print('  ' + '  '.join(f"{item['char']} {item['romaji']:<4}" for item in row))
        print()

    def print_toggle(self, result: dict):
        """Print the result of a selection toggle."""
        if not result['success']:
            print(f"Rejected: {result['error']}")
        self.print_selection(result['selection'])

    def settle(self, state: dict) -> dict:
        """Wait out the flip-back before showing a card that changed while face-up."""
        if state['visible_item'] != state['current_item']:
            time.sleep(SETTLE_DELAY_SECONDS)
            state = self.client.get_state()
        return state

    def print_help(self):
        print('Commands:')
        print('  <enter>/n       next character')
        print('  f               flip the card')
        print('  mode            switch char-first / romaji-first')
        print('  group <id>      toggle a group (e.g. "group K-series")')
        print('  type <name>     toggle hiragana / katakana')
        print('  diacritics      toggle all voiced groups')
        print('  groups          list groups')
        print('  chart [type]    show a reference chart')
        print('  stroke          stroke count for the current character')
        print('  status          show settings')
        print('  exit            quit')

    def handle(self, command: str, state: dict) -> dict:
        """Run one command and return the new study state."""
        parts = command.split(maxsplit=1)
        name = parts[0].lower() if parts else 'n'
        arg = parts[1].strip() if len(parts) > 1 else ''

        if name in ('n', 'next'):
            return self.settle(self.client.next_card())

        if name in ('f', 'flip'):
            state = self.client.flip()
            if state['is_flipped'] and state['is_loading']:
                self.print_card(state)
                state = self.client.get_state(wait=True)
            return state

        if name == 'mode':
            current = state['study_mode']
            mode = STUDY_MODES[(STUDY_MODES.index(current) + 1) % len(STUDY_MODES)]
            self.print_toggle(self.client.set_mode(mode))
        elif name == 'group':
            self.print_toggle(self.client.toggle_group(arg))
        elif name == 'type':
            self.print_toggle(self.client.toggle_type(arg.lower()))
        elif name == 'diacritics':
            self.print_toggle(self.client.toggle_diacritics())
        elif name == 'groups':
            self.print_groups(self.client.get_groups(), self.client.get_selection())
        elif name == 'chart':
            self.print_chart(self.client.get_chart(arg.lower() or 'hiragana'))
        elif name == 'stroke':
            self.print_stroke(state)
        elif name == 'status':
            self.print_selection(self.client.get_selection())
        else:
            self.print_help()
        return self.settle(self.client.get_state())

    def print_stroke(self, state: dict):
        """Print the stroke count of the visible character."""
        item = state['visible_item']
        if not item:
            print('No character to look up.')
            return
        svg = self.client.get_stroke(item['char'])
        if svg is None:
            print(f"Stroke order not available for {item['char']}.")
            return
        print(f"{item['char']}: {count_strokes(svg)} strokes")

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to kanacards server ({health['service']})")
        except Exception as e:
            print(f"Error: Cannot connect to server at {self.client.base_url} ({e})")
            print("Make sure the server is running: python run_server.py")
            return

        self.print_selection(self.client.get_selection())
        self.print_help()
        state = self.client.start_study()

        while True:
            self.print_card(state)
            user_input = input('==> ').strip()

            if user_input.lower() == 'exit':
                self.client.exit_study()
                print('Goodbye!')
                return

            try:
                state = self.handle(user_input, state)
            except Exception as e:
                print(f"Error: {e}")
                state = self.client.get_state()
