"""
Пакет textattrs
===============

Атрибуты текста для конвейера шейпинга и вёрстки: цвет, семейство шрифта,
насыщенность, ширина, начертание, масштаб и произвольная метка, назначенные
непересекающимся диапазонам байтовых смещений строки.

Этот пакет предоставляет:
    - Упакованный 32-битный цвет (ARGB) с разбором CSS-строк через Pillow
    - Неизменяемый снимок атрибутов Attrs с полным сравнением и хешированием
    - Интервальное отображение с перезаписью при вставке
    - Список атрибутов строки (AttrsList) с разбиением строки split_off
    - Предикаты matches (подбор начертания) и compatible (шейпинг одним прогоном)

Пример базового использования:
    >>> from textattrs import Attrs, AttrsList, Color, Weight, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> line = AttrsList(Attrs())
    >>> line.add_span(range(0, 5), Attrs().with_weight(Weight.BOLD))
    >>> line.add_span(range(3, 8), Attrs().with_color(Color.rgb(255, 0, 0)))
    >>> tail = line.split_off(5)
    >>> logger.info(f"Осталось {len(line.spans())} span, перенесено {len(tail.spans())}")

Управление конфигурацией:
    >>> import os
    >>> os.environ['TEXTATTRS_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from textattrs import load_config, AttrsList
    >>>
    >>> config = load_config()
    >>> line = AttrsList.from_config(config)

Автор: textattrs Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.10+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "textattrs Development Team"
__description__ = "Span-based text attribute lists for text shaping and layout"
__license__ = "MIT"
__python_requires__ = ">=3.10"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"textattrs требует Python 3.10 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "textattrs"


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    Настраивает логгер пакета ``textattrs`` с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения TEXTATTRS_LOG_FILE

    Уровень задаётся переменной TEXTATTRS_LOG_LEVEL
    (DEBUG, INFO, WARNING, ERROR, CRITICAL; по умолчанию INFO).

    Идемпотентна: повторные вызовы ничего не меняют.
    """
    log_level_str = os.environ.get("TEXTATTRS_LOG_LEVEL", "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get("TEXTATTRS_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета.

    Логгеры именуются как 'textattrs.<module_name>'; модули самого пакета
    (``__name__`` уже начинается с ``textattrs``) получают своё имя как есть.

    Аргументы:
        module_name: Обычно ``__name__`` вызывающего модуля.

    Возвращает:
        Экземпляр logging.Logger.
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{module_name.lstrip('.')}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

CONFIG_FILENAME = "textattrs.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_family": "sans-serif",
    "default_weight": 400,
    "default_style": "normal",
    "default_stretch": 5,
    "default_scaling": 1.0,
    "default_color": None,
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из textattrs.json или вернуть настройки по умолчанию.

    Ключи конфигурации:
        - default_family: str - Семейство ("serif", "monospace", "Fira Sans", ...)
        - default_weight: int | str - Насыщенность (400, "bold", ...)
        - default_style: str - Начертание ("normal", "italic", "oblique")
        - default_stretch: int | str - Ширина (1..9 или "condensed", ...)
        - default_scaling: float - Масштаб
        - default_color: str | None - Цвет в CSS-нотации
        - log_level: str - Уровень логирования

    Если файл отсутствует, не читается или содержит не JSON-объект,
    возвращаются значения по умолчанию, а в лог пишется предупреждение.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(CONFIG_FILENAME)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info(f"Конфигурация загружена из {config_path}")
        logger.debug(f"Конфигурация: {config}")

    except json.JSONDecodeError as e:
        logger.warning(
            f"Не удалось разобрать {config_path}: Недопустимый JSON "
            f"в строке {e.lineno}, столбце {e.colno}. "
            f"Используется конфигурация по умолчанию."
        )
    except OSError as e:
        logger.warning(
            f"Не удалось прочитать {config_path}: {e}. "
            f"Используется конфигурация по умолчанию."
        )
    except ValueError as e:
        logger.warning(
            f"Недопустимый формат конфигурации: {e}. "
            f"Используется конфигурация по умолчанию."
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить доступность Pillow и его опциональных возможностей.

    Возвращает:
        Словарь: "pillow" - пакет установлен, "freetype" - Pillow собран
        с FreeType (нужно для FaceInfo.from_file).
    """
    dependencies: Dict[str, bool] = {}

    try:
        from PIL import features

        dependencies["pillow"] = True
        dependencies["freetype"] = bool(features.check("freetype2"))
    except ImportError:
        dependencies["pillow"] = False
        dependencies["freetype"] = False

    return dependencies


# =============================================================================
# ИМПОРТЫ СЛОЯ МОДЕЛИ
# =============================================================================

# Примечание: импорты после утилит, чтобы логирование было настроено первым.

from .model.attrs import Attrs, total_cmp, total_order_key  # noqa: E402
from .model.attrs_list import AttrsList, Span  # noqa: E402
from .model.color import Color  # noqa: E402
from .model.enums import FamilyKind, Stretch, Style, Weight  # noqa: E402
from .model.face import FaceInfo  # noqa: E402
from .model.family import Family  # noqa: E402
from .model.interval_map import IntervalMap, IntervalMapInvariantError  # noqa: E402

# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУБЛИЧНОГО API
# =============================================================================

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "check_dependencies",
    # Модель
    "Attrs",
    "AttrsList",
    "Color",
    "FaceInfo",
    "Family",
    "IntervalMap",
    "IntervalMapInvariantError",
    "Span",
    "total_cmp",
    "total_order_key",
    # Перечисления
    "FamilyKind",
    "Stretch",
    "Style",
    "Weight",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"textattrs v{__version__} инициализирован")
_logger.debug(f"Версия Python: {sys.version}")
