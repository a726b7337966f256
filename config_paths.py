import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "modwiz")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "modwiz.log")

# default settings
NAMESPACE_DEFAULT = "modid"
OUTPUT_DIR_DEFAULT = "."
LANG_CODE_DEFAULT = "en_us"
OVERWRITE_DEFAULT = False
ITEM_DEFAULTS = {"handheld": False, "lang": True}
BLOCK_DEFAULTS = {"lang": True, "loot_table": True}

logger = logging.getLogger(__name__)


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def configure_logging(level=None):
    """Send log records to LOG_PATH; curses owns stdout while the wizard runs."""
    level = level or os.environ.get("MODWIZ_LOG_LEVEL", "INFO")
    root = logging.getLogger()
    for handler in root.handlers:
        if getattr(handler, "baseFilename", None) == os.path.abspath(LOG_PATH):
            return
    try:
        ensure_config_dirs()
        handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    except OSError:
        return
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def _bool_defaults(base, raw):
    merged = dict(base)
    if isinstance(raw, dict):
        for key in base:
            value = raw.get(key)
            if isinstance(value, bool):
                merged[key] = value
    return merged


def load_config():
    cfg = {
        "NAMESPACE": NAMESPACE_DEFAULT,
        "OUTPUT_DIR": OUTPUT_DIR_DEFAULT,
        "LANG_CODE": LANG_CODE_DEFAULT,
        "OVERWRITE": OVERWRITE_DEFAULT,
        "ITEM_DEFAULTS": dict(ITEM_DEFAULTS),
        "BLOCK_DEFAULTS": dict(BLOCK_DEFAULTS),
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, e)
        return cfg

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", CONFIG_JSON)
        return cfg

    namespace = data.get("namespace")
    if isinstance(namespace, str):
        cfg["NAMESPACE"] = namespace
    output_dir = data.get("output_dir")
    if isinstance(output_dir, str) and output_dir.strip():
        cfg["OUTPUT_DIR"] = os.path.expanduser(output_dir)
    lang_code = data.get("lang_code")
    if isinstance(lang_code, str) and lang_code.strip():
        cfg["LANG_CODE"] = lang_code.strip()
    overwrite = data.get("overwrite")
    if isinstance(overwrite, bool):
        cfg["OVERWRITE"] = overwrite

    cfg["ITEM_DEFAULTS"] = _bool_defaults(ITEM_DEFAULTS, data.get("item_defaults"))
    cfg["BLOCK_DEFAULTS"] = _bool_defaults(BLOCK_DEFAULTS, data.get("block_defaults"))
    return cfg
