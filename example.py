import argparse
import logging
import time

from auto_media import MusicService, ServiceConfig


def run(config, delay):
    service = MusicService(config)
    service.on_create()

    root = service.on_get_root("example", 0)
    items = service.on_load_children(root.root_id)
    print("Catalog:")
    for item in items:
        print(f"  {item.title} - {item.subtitle} ({item.media_id})")

    print("Play first track")
    service.on_play()
    time.sleep(delay)

    print("Pause")
    service.on_pause()
    time.sleep(delay / 2)

    print("Resume")
    service.on_play()
    time.sleep(delay)

    if len(items) > 1:
        print(f"Play {items[-1].title}")
        service.on_play_from_media_id(items[-1].media_id)
        time.sleep(delay)

    service.on_destroy()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Drive the music service through a play/pause/switch sequence")
    parser.add_argument("--catalog", help="JSON catalog file (defaults to the built-in playlist)")
    parser.add_argument("--delay", type=float, default=5.0, help="Seconds between commands")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    run(ServiceConfig.from_file(args.catalog) if args.catalog else ServiceConfig.from_env(), args.delay)
