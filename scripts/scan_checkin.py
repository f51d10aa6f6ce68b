"""Camera kiosk: scan member QR codes and check them in, one scan at a time.

Each activation opens the camera, waits for one decoded code, releases the
camera, then runs the check-in. Ctrl+C stops the loop.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.gym_checkin.gym_checkin.container import build_container
from src.gym_checkin.gym_checkin.core.exceptions import CheckInError, ScannerError, StoreError
from src.gym_checkin.gym_checkin.main import configure_logging, settings_dict
from src.gym_checkin.gym_checkin.scanning.camera import CameraFrameSource
from src.gym_checkin.gym_checkin.scanning.decoder import decode_qr
from src.gym_checkin.gym_checkin.scanning.scanner import scan_once

logger = logging.getLogger("scripts.scan_checkin")


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    parser = argparse.ArgumentParser(description="Check in gym members from a camera")
    parser.add_argument("--camera", type=int, default=getattr(settings, "SCANNER_CAMERA_INDEX", 0))
    parser.add_argument("--timeout", type=float, default=getattr(settings, "SCANNER_TIMEOUT_SECONDS", 30.0))
    parser.add_argument("--once", action="store_true", help="stop after the first scan")
    args = parser.parse_args()

    container = build_container(db_config=dict(settings.DB_CONFIG), settings=settings_dict(settings))
    try:
        while True:
            try:
                text = scan_once(CameraFrameSource(args.camera), decode_qr, timeout=args.timeout)
            except ScannerError as e:
                logger.error("%s", e)
                return 1

            if text is None:
                logger.info("No QR code within %.0fs", args.timeout)
            else:
                try:
                    result = container.checkin_service.check_in_scanned(text)
                    print(f"OK   {result.member.name}: {result.message}")
                except (CheckInError, StoreError) as e:
                    print(f"FAIL {e.code}: {e.message}")

            if args.once:
                return 0
    except KeyboardInterrupt:
        return 0
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
