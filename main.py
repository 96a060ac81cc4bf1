from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.group_list_model import ThumbnailRecorder
from app.views.main_window import MainWindow
from core.models import MediaKind
from infrastructure.delete_service import DeleteService
from infrastructure.logging import init_logging
from infrastructure.media_repository import DirectoryMediaRepository
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    init_logging(debug=settings.get_bool("logging.debug", False))

    app = QApplication(sys.argv)

    try:
        kind = MediaKind.from_label(settings.get("media.kind", "video"))
    except ValueError as ex:
        logger.warning("{}; falling back to video", ex)
        kind = MediaKind.VIDEO

    deleter = DeleteService(
        use_recycle_bin=settings.get_bool("delete.use_recycle_bin", True),
        log_dir=settings.get("delete.log_dir"),
    )
    vm = MainVM(
        DirectoryMediaRepository(),
        kind=kind,
        default_sort=settings.get_sort_keys(),
        delete_service=deleter,
        keep_failed=settings.get_bool("delete.keep_failed_entries", False),
        image_loader=ThumbnailRecorder(),
    )

    win = MainWindow(vm=vm, settings=settings)
    directory = sys.argv[1] if len(sys.argv) > 1 else settings.get("media.directory")
    if directory:
        win.load_directory(str(directory))
    win.statusBar().showMessage("Ready", 2000)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
