import logging
import logging.handlers
from pathlib import Path
from core.config import settings
from core.error_logger import setup_error_reporting
import uvicorn


def configure_logging(logs_dir: Path) -> logging.Logger:
	logs_dir.mkdir(parents=True, exist_ok=True)

	console_handler = logging.StreamHandler()
	console_handler.setLevel(logging.DEBUG)

	file_handler = logging.handlers.RotatingFileHandler(
		logs_dir / "app.log",
		maxBytes=10*1024*1024,  # 10MB
		backupCount=5,
		encoding='utf-8'
	)
	file_handler.setLevel(logging.WARNING)

	logging.basicConfig(
		level=settings.app.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
		handlers=[
			console_handler,
			file_handler
		]
	)

	error_logger = logging.getLogger("error_reports")
	error_logger.setLevel(logging.ERROR)

	error_formatter = logging.Formatter(
		fmt="""%(asctime)s - ERROR REPORT
=====================================
Logger: %(name)s
Level: %(levelname)s
Message: %(message)s
Module: %(module)s
Function: %(funcName)s
Line: %(lineno)d
Process: %(process)d

--- END ERROR REPORT ---
""",
		datefmt="%Y-%m-%d %H:%M:%S"
	)

	error_file_handler = logging.handlers.TimedRotatingFileHandler(
		logs_dir / "errors.log",
		when="midnight",
		interval=1,
		backupCount=30,
		encoding='utf-8'
	)
	error_file_handler.setFormatter(error_formatter)
	error_file_handler.setLevel(logging.ERROR)

	json_error_formatter = logging.Formatter(
		'{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
		'"message": "%(message)s", "module": "%(module)s", "function": "%(funcName)s", '
		'"line": %(lineno)d}'
	)
	json_error_handler = logging.handlers.RotatingFileHandler(
		logs_dir / "errors.json",
		maxBytes=50*1024*1024,  # 50MB
		backupCount=10,
		encoding='utf-8'
	)
	json_error_handler.setFormatter(json_error_formatter)
	json_error_handler.setLevel(logging.ERROR)

	error_logger.addHandler(error_file_handler)
	error_logger.addHandler(json_error_handler)
	# Reports go to their own files only
	error_logger.propagate = False

	logging.getLogger("httpx").setLevel(logging.WARNING)
	return error_logger


logs_dir = Path(settings.app.logs_dir)
setup_error_reporting(configure_logging(logs_dir))
logging.getLogger("startup").info("Logging configured, log files in %s", logs_dir.absolute())

from presentation.app import create_app

app = create_app()

if __name__ == "__main__":
	uvicorn.run(
		"main:app",
		host=settings.app.host,
		port=settings.app.port,
		reload_excludes=["logs/*", "logs/**/*", "*.log"],
	)
