import hashlib
import logging
import os
import pathlib

from datetime import datetime
from typing import Optional

from zanbil_cc.constants import LOG_FORMAT


def init_logging(level_name: str) -> None:
    logging.basicConfig(level=level_name, format=LOG_FORMAT)


def mkdir_p(dir_path: str) -> None:
    pathlib.Path(dir_path).mkdir(parents=True, exist_ok=True)


def which(file_name: str) -> Optional[str]:
    for path in os.environ.get("PATH", "").split(os.pathsep):
        if not path:
            continue
        full_path = os.path.join(path, file_name)
        if os.path.isfile(full_path) and os.access(full_path, os.X_OK):
            return full_path
    return None


def str_md5(s: str) -> str:
    return hashlib.md5(s.encode('utf-8', errors='surrogateescape')).hexdigest()


def get_current_timestamp_str() -> str:
    return datetime.now().strftime('%Y-%m-%dT%H-%M-%S.%f')
