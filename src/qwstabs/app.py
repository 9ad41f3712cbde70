import sys

from PySide6.QtWidgets import QApplication

from qwstabs.app_info import APP_NAME, APP_ORG
from qwstabs.core import AppContext
from qwstabs.ui.shell_window import ShellWindow


def main() -> int:
    """Application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORG)

    ctx = AppContext.create(qt_app=app)

    window = ShellWindow(ctx=ctx)
    window.show()

    exit_code = app.exec()
    ctx.settings_manager.log_system_event("Application exiting", f"code={exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
