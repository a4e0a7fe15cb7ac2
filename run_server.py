#!/usr/bin/env python3
"""Start the kanacards API server that the console client talks to."""

import uvicorn


def main():
    print("KanaCards: hiragana and katakana flashcards with Gemini mnemonics")
    print("Serving on http://localhost:8000 (interactive docs under /docs)")
    print("Set GEMINI_API_KEY or ~/.config/kanacards/config.json before studying")
    uvicorn.run(
        "server.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )


if __name__ == "__main__":
    main()
