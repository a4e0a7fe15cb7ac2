"""REST API client for kanacards server."""

import requests


class KanaCardsAPIClient:
    """Client for communicating with the kanacards REST API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params or {})
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_groups(self) -> dict:
        """Get kana groups and script types."""
        return self._get("/api/groups")

    def get_chart(self, kana_type: str) -> dict:
        """Get the reference chart for one script."""
        return self._get(f"/api/chart/{kana_type}")

    def get_selection(self) -> dict:
        """Get the current selection."""
        return self._get("/api/selection")

    def toggle_group(self, group: str) -> dict:
        """Toggle a kana group."""
        return self._post("/api/selection/group", {'group': group})

    def toggle_type(self, kana_type: str) -> dict:
        """Toggle a script type."""
        return self._post("/api/selection/type", {'type': kana_type})

    def toggle_diacritics(self) -> dict:
        """Toggle all diacritic groups."""
        return self._post("/api/selection/diacritics")

    def set_mode(self, mode: str) -> dict:
        """Set the study direction."""
        return self._post("/api/selection/mode", {'mode': mode})

    def start_study(self) -> dict:
        """Enter the study view."""
        return self._post("/api/study/start")

    def exit_study(self) -> dict:
        """Leave the study view."""
        return self._post("/api/study/exit")

    def next_card(self) -> dict:
        """Advance to the next card."""
        return self._post("/api/study/next")

    def flip(self) -> dict:
        """Flip the current card."""
        return self._post("/api/study/flip")

    def get_state(self, wait: bool = False) -> dict:
        """Get the study state, optionally waiting for the mnemonic."""
        return self._get("/api/study/state", {'wait': str(wait).lower()})

    def get_stroke(self, char: str) -> str | None:
        """Get the stroke order SVG, or None if unavailable."""
        response = self.session.get(f"{self.base_url}/api/stroke/{char}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.text
