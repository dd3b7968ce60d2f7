# apps/cli/play.py
"""
Play word golf in the terminal.

Type a word to add it to your chain. Commands:
  :undo  :flip  :hint  :giveup  :new  :play START TARGET
  :difficulty N|unlimited  :load PATH  :quit
"""

from __future__ import annotations

import argparse
import logging

from packages.game import GameSession, JsonFileStorage


def render(session: GameSession) -> None:
    s = session.snapshot()
    if not s["chain"]:
        print(s["status_message"] or "No puzzle.")
        return

    print()
    print("  " + " → ".join(s["chain"][:-1]) + "  …  " + s["target_word"])
    print(f"  steps: {s['user_steps']}  (par {s['optimal_steps']}, "
          f"difficulty {session.difficulty.display_name})")
    if s["hints"]:
        print("  hints: " + ", ".join(s["hints"]))
    if s["status_message"]:
        print(f"  ! {s['status_message']}")
    if s["gave_up"]:
        print("  Solution: " + session.optimal_path_string)
    elif s["won"]:
        print(f"  Solved in {s['user_steps']} step(s)! Par was {s['optimal_steps']}.")


def main():
    ap = argparse.ArgumentParser(description="wordgolf — play in the terminal")
    ap.add_argument("--wordlist", help="custom word list (default: bundled)")
    ap.add_argument("--N", type=int, default=4, help="word length")
    ap.add_argument("--seed", type=int, help="RNG seed")
    ap.add_argument("--settings", help="settings file (default: ~/.config/wordgolf/settings.json)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    session = GameSession(storage=JsonFileStorage(args.settings), source=args.wordlist,
                          N=args.N, seed=args.seed)
    session.subscribe(render)
    render(session)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue
        if not line.startswith(":"):
            session.current_input = line
            session.submit_word()
            continue

        cmd, _, arg = line[1:].partition(" ")
        cmd = cmd.lower()
        if cmd in ("quit", "q", "exit"):
            break
        elif cmd == "undo":
            session.undo()
        elif cmd == "flip":
            session.flip_direction()
        elif cmd == "hint":
            if session.get_hint() is None:
                print("  (no hint available)")
        elif cmd == "giveup":
            session.give_up()
        elif cmd == "new":
            session.new_challenge()
        elif cmd == "play":
            words = arg.split()
            if len(words) != 2:
                print("  usage: :play START TARGET")
            else:
                session.play(*words)
        elif cmd == "difficulty":
            session.set_difficulty(arg or "4")
        elif cmd == "load":
            session.load_dictionary(arg.strip() or None)
        else:
            print(f"  unknown command: {cmd}")


if __name__ == "__main__":
    main()
