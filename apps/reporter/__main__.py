from __future__ import annotations

import argparse
import logging

from adapters.time import TimerScheduler
from shared.config.loader import load_reporter_settings

from apps.reporter.compose import build_reporter


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="zenit-reporter")
    ap.add_argument("--profile", default=None, help="Config profile name (configs/profiles/<name>.toml).")
    ap.add_argument("--delay-ms", type=int, default=None, help="Override the base delay.")
    ap.add_argument("--wait", action="store_true", help="Block until the scheduled send has run.")
    ap.add_argument("--log-level", default="INFO")
    ap.add_argument("--quiet", action="store_true", help="Reduce console output.")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    settings = load_reporter_settings(profile=args.profile)
    if args.delay_ms is not None:
        settings = settings.model_copy(update={"telemetry_delay_ms": max(1, args.delay_ms)})

    scheduler = TimerScheduler()
    reporter = build_reporter(settings, scheduler=scheduler)

    if not args.quiet:
        print(
            f"[reporter] application={settings.mod_name} version={settings.mod_version} "
            f"url={settings.telemetry_url} enabled={settings.telemetry_enabled} "
            f"base_delay_ms={settings.telemetry_delay_ms}"
        )

    reporter.on_load()

    if args.wait:
        try:
            scheduler.join()
        except KeyboardInterrupt:
            if not args.quiet:
                print("\n[reporter] interrupted; pending telemetry dropped.")
            scheduler.cancel_all()
    if not args.quiet:
        print(f"[reporter] sent={reporter.guard.sent}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
