"""
Command line entry point for SecureLink.
"""

import sys
import time
import getpass
import logging
import argparse
import webbrowser
from typing import List, Optional

from .crypto import CryptoManager
from .link_manager import LinkManager, Outcome
from .passwords import PasswordStrengthValidator, generate_password
from .settings import Settings, load_settings, save_settings, clamp_redirect_delay
from .errors import InputError, UrlValidationError
from .urls import parse_url
from . import config

logger = logging.getLogger(__name__)


def _on_off(value: str) -> bool:
    value = value.lower()
    if value in ('on', 'yes', 'true', '1'):
        return True
    if value in ('off', 'no', 'false', '0'):
        return False
    raise argparse.ArgumentTypeError(f"expected on or off, got {value!r}")


def _read_password(args: argparse.Namespace, prompt: str = "Password: ") -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass(prompt)


def _format_strength(password: str) -> str:
    result = PasswordStrengthValidator.score(password)
    return f"Password strength: {result.level.capitalize()} ({result.count}/5)"


def _print_sealed(outcome: Outcome, copy: bool = False) -> int:
    if not outcome.success:
        print(f"[!] {outcome.message}")
        return 1

    print(f"[+] {outcome.message}")
    for sealed in outcome.value:
        print(f"{sealed.original}")
        print(f"    link:  {sealed.share_link}")
        print(f"    token: {sealed.token}")

    if copy:
        from . import clipboard
        clipboard.write_text('\n'.join(s.share_link for s in outcome.value))
        print("[+] Link copied to clipboard")
    return 0


def _redirect(url: str, delay: int) -> None:
    """Count down, then open the URL in the default browser."""
    try:
        parse_url(url)
    except UrlValidationError:
        logger.warning("Decrypted text is not an http(s) URL, not opening it")
        return

    try:
        for remaining in range(delay, 0, -1):
            print(config.MSG_REDIRECT_COUNTDOWN.format(seconds=remaining))
            time.sleep(1)
    except KeyboardInterrupt:
        print(config.MSG_REDIRECT_CANCELLED)
        return
    webbrowser.open(url)


def cmd_seal(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    if args.generate:
        password = generate_password()
        print(f"Generated password: {password}")
    else:
        password = _read_password(args)

    if settings.show_password_strength and password:
        print(_format_strength(password))
    return _print_sealed(manager.encrypt_url(args.url, password), copy=args.copy)


def cmd_bulk(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    if args.file and args.file != '-':
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            print(f"[!] Cannot read {args.file}: {e.strerror}")
            return 1
    else:
        text = sys.stdin.read()
    password = _read_password(args)
    return _print_sealed(manager.encrypt_bulk(text, password), copy=args.copy)


def cmd_scan(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    if args.clipboard:
        from . import clipboard
        text = clipboard.read_text()
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()

    outcome = manager.scan_text(text)
    if not outcome.success:
        print(f"[!] {outcome.message}")
        return 1

    print(f"[+] {outcome.message}")
    for url in outcome.value:
        print(url)

    if not args.encrypt:
        return 0
    password = _read_password(args)
    return _print_sealed(manager.encrypt_selected(outcome.value, password), copy=args.copy)


def cmd_open(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    try:
        session = manager.session_from_link(args.link)
    except InputError as e:
        print(f"[!] {e}")
        return 1

    while True:
        try:
            password = _read_password(args)
        except (EOFError, KeyboardInterrupt):
            print()
            return 1

        outcome = manager.decrypt(session, password)
        if outcome.success:
            break
        print(f"[!] {outcome.message}")
        # A password given on the command line gets exactly one attempt
        if args.password is not None:
            return 1

    print(outcome.value)
    if settings.auto_redirect and not args.no_redirect:
        _redirect(outcome.value, settings.redirect_delay)
    return 0


def cmd_generate(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    try:
        password = generate_password(args.length)
    except ValueError as e:
        print(f"[!] {e}")
        return 1
    print(password)
    return 0


def cmd_strength(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    password = args.password_arg if args.password_arg is not None else getpass.getpass("Password: ")
    result = PasswordStrengthValidator.score(password)
    print(_format_strength(password))
    for name, passed in result.criteria.items():
        print(f"  [{'x' if passed else ' '}] {name}")
    return 0


def cmd_settings(args: argparse.Namespace, manager: LinkManager, settings: Settings) -> int:
    changed = False
    if args.auto_redirect is not None:
        settings.auto_redirect = args.auto_redirect
        changed = True
    if args.redirect_delay is not None:
        settings.redirect_delay = clamp_redirect_delay(args.redirect_delay)
        changed = True
    if args.show_strength is not None:
        settings.show_password_strength = args.show_strength
        changed = True

    if changed:
        try:
            save_settings(settings, args.settings_file)
        except OSError as e:
            print(f"[!] Cannot save settings: {e.strerror or e}")
            return 1
        print("[+] Settings saved")

    for name, value in settings.to_dict().items():
        print(f"{name} = {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog=config.APP_PROG, description=config.APP_DESCRIPTION)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings-file", default=None, help="Settings file to use instead of the default")
    parser.add_argument("--base-url", default=config.DEFAULT_BASE_URL, help="Address that share links point to")
    parser.add_argument("--hash", dest="hash_name", choices=config.PBKDF2_HASHES, default=config.PBKDF2_HASH,
                        help="PBKDF2 hash; sha1 opens tokens from older issuers")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_password(p) -> None:
        p.add_argument("-p", "--password", default=None, help="Password (prompted for if omitted)")

    p = sub.add_parser("seal", help="Encrypt one URL")
    p.add_argument("url")
    source = p.add_mutually_exclusive_group()
    add_password(source)
    source.add_argument("-g", "--generate", action="store_true", help="Generate a strong password and print it")
    p.add_argument("--copy", action="store_true", help="Copy the share link to the clipboard")
    p.set_defaults(func=cmd_seal)

    p = sub.add_parser("bulk", help="Encrypt one URL per line from a file or stdin")
    p.add_argument("file", nargs="?", default=None)
    add_password(p)
    p.add_argument("--copy", action="store_true", help="Copy the share links to the clipboard")
    p.set_defaults(func=cmd_bulk)

    p = sub.add_parser("scan", help="Find URLs in text, stdin or the clipboard")
    p.add_argument("text", nargs="?", default=None)
    p.add_argument("--clipboard", action="store_true", help="Read the text from the clipboard")
    p.add_argument("--encrypt", action="store_true", help="Encrypt every URL found")
    add_password(p)
    p.add_argument("--copy", action="store_true", help="Copy the share links to the clipboard")
    p.set_defaults(func=cmd_scan)

    p = sub.add_parser("open", help="Decrypt a share link or token")
    p.add_argument("link")
    add_password(p)
    p.add_argument("--no-redirect", action="store_true", help="Never open the URL in a browser")
    p.set_defaults(func=cmd_open)

    p = sub.add_parser("generate", help="Generate a strong password")
    p.add_argument("-l", "--length", type=int, default=config.PASSWORD_GENERATOR_DEFAULT_LENGTH)
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("strength", help="Score a password")
    p.add_argument("password_arg", nargs="?", default=None, metavar="password")
    p.set_defaults(func=cmd_strength)

    p = sub.add_parser("settings", help="Show or change display settings")
    p.add_argument("--auto-redirect", type=_on_off, default=None, metavar="on|off")
    p.add_argument("--redirect-delay", type=int, default=None, metavar="SECONDS")
    p.add_argument("--show-strength", type=_on_off, default=None, metavar="on|off")
    p.set_defaults(func=cmd_settings)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )

    settings = load_settings(args.settings_file)
    manager = LinkManager(crypto=CryptoManager(args.hash_name), base_url=args.base_url)
    try:
        return args.func(args, manager, settings)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())
