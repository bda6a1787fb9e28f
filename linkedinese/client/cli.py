import argparse
import os
import sys

import httpx
import pyperclip

from .form import FormController

DEFAULT_URL = os.getenv("LINKEDINESE_URL", "http://localhost:8000")

def _no_clipboard(text: str) -> None:
    pass

def main(argv=None):
    parser = argparse.ArgumentParser(description='Rewrite casual text as a LinkedIn-style post')
    parser.add_argument('text', nargs='?', help='Text to rewrite (default: read from stdin)')
    parser.add_argument('--url', default=DEFAULT_URL, help=f'Base URL of the LinkedInese service (default: {DEFAULT_URL})')
    parser.add_argument('--no-clipboard', action='store_true', help='Do not copy output to clipboard')
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else sys.stdin.read()
    clipboard = _no_clipboard if args.no_clipboard else pyperclip.copy

    with httpx.Client(timeout=None) as http_client:
        form = FormController(f"{args.url.rstrip('/')}/api/linkedinify", http_client, clipboard)
        form.set_input(text)
        state = form.submit()

        if state.error:
            print(f"Error: {state.error}", file=sys.stderr)
            return 1

        print(state.output)
        if not args.no_clipboard:
            try:
                form.copy()
                print("✅ Copied to clipboard", file=sys.stderr)
            except pyperclip.PyperclipException as e:
                print(f"❌ Failed to copy to clipboard: {e}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
