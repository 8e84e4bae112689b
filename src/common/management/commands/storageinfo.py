"""
Management command: storageinfo

Prints where static and media files come from and where they end up:
the resolved settings, every static file the finders discover (what
``collectstatic`` would copy into STATIC_ROOT), and optionally the uploaded
files currently under MEDIA_ROOT.

Usage:
  python manage.py storageinfo
  python manage.py storageinfo --media
"""

import structlog
from django.core.management.base import BaseCommand

from src.common.storage import describe_storage, iter_media_files, iter_static_sources

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = "Show static/media settings and the files each side holds."

    def add_arguments(self, parser):
        parser.add_argument(
            "--media",
            action="store_true",
            help="Also list uploaded files under MEDIA_ROOT.",
        )
        parser.add_argument(
            "--no-static",
            action="store_true",
            dest="no_static",
            help="Skip the static file listing.",
        )

    def handle(self, *args, **options):
        info = describe_storage()

        self.stdout.write(self.style.MIGRATE_HEADING("Settings"))
        for key, value in info.items():
            self.stdout.write(f"  {key.upper()}: {value}")

        static_count = 0
        if not options["no_static"]:
            self.stdout.write(self.style.MIGRATE_HEADING("Static files (finders)"))
            for rel, source in iter_static_sources():
                self.stdout.write(f"  {rel}  <-  {source}")
                static_count += 1
            self.stdout.write(f"  {static_count} static file(s) found.")

        media_count = 0
        if options["media"]:
            self.stdout.write(self.style.MIGRATE_HEADING("Media files (MEDIA_ROOT)"))
            for rel, size in iter_media_files():
                self.stdout.write(f"  {rel}  ({size} bytes)")
                media_count += 1
            self.stdout.write(f"  {media_count} media file(s) stored.")

        logger.info(
            "storageinfo_completed",
            static_files=static_count,
            media_files=media_count,
        )
