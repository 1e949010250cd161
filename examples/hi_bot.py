"""Reply to "hi" in one room and follow every invite.

Usage::

    python examples/hi_bot.py https://matrix.example.org '#bots:example.org' --token TOKEN
    python examples/hi_bot.py https://matrix.example.org '#bots:example.org' --user bot --password secret
"""

from __future__ import annotations

import argparse
import logging
import time

from dementia import ConfigError, Homeserver, MatrixHTTPError, TextContent

log = logging.getLogger("hi_bot")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("homeserver")
    parser.add_argument("room", help="room id or alias (quote the '#' in your shell)")
    parser.add_argument("--token")
    parser.add_argument("--user")
    parser.add_argument("--password")
    parser.add_argument("--interval", type=float, default=10.0)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        server = Homeserver.from_url(
            args.homeserver,
            access_token=args.token,
            username=args.user,
            password=args.password,
            poll_interval=args.interval,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    with server:
        server.connect()
        try:
            room = server.join_room(args.room)
        except MatrixHTTPError as exc:
            log.error("Joining room %r failed: %s", args.room, exc)
            return 1

        while True:
            for invite in server.get_invites():
                try:
                    server.join_room(invite)
                except MatrixHTTPError as exc:
                    log.warning("Could not accept invite to %s: %s", invite, exc)

            for event in room.get_new_messages():
                if isinstance(event.content, TextContent):
                    log.info("%s: %s", event.sender, event.body)
                    if event.body == "hi":
                        room.send_notice(f"ahoi, {event.sender}!")

            time.sleep(server.config.poll_interval)


if __name__ == "__main__":
    raise SystemExit(main())
