import json
import logging
import os
import sys
import time
from urllib.parse import urlparse, parse_qs

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from .exceptions import InvalidInputError, MappingError, MissingInputError

# Try to load .env from multiple locations
for env_path in [".env", os.path.expanduser("~/.env")]:
    if os.path.exists(env_path):
        load_dotenv(dotenv_path=env_path)
        break
else:
    load_dotenv()

LOG_LEVEL = os.getenv("COUNTY_MAPPER_LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("COUNTY_MAPPER_LOG_DIR")
OUTPUT_DIR = os.getenv("COUNTY_MAPPER_OUTPUT_DIR", "owners")

INPUT_HTML = "input.html"
INPUT_JSON = "input.json"
SEED_FILES = ("property_seed.json", "parcel.json")

OWNER_FILE = "owner_data.json"
LAYOUT_FILE = "layout_data.json"
STRUCTURE_FILE = "structure_data.json"
UTILITY_FILE = "utilities_data.json"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level=None, log_dir=None):
    """Configure root logging once per process.

    Console output goes to stderr so scripts can keep stdout for JSON. When a
    log directory is configured, a per-run ``workflow_<ts>.log`` file also
    receives every record at the chosen level. Returns the log file path, if any.
    """
    level_name = (level or LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    log_dir = log_dir or LOG_DIR
    if log_dir:
        ensure_directory(log_dir)
        log_file_path = os.path.join(log_dir, f"workflow_{int(time.time())}.log")
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # bs4 warns about markup that looks like a filename or URL
    logging.getLogger("bs4").setLevel(logging.ERROR)
    return log_file_path


def run_script(main):
    """Entry point of a county script run as a module: log a fatal error and exit 1."""
    setup_logging()
    try:
        main()
    except MappingError as e:
        logger.error(f"❌ {e.to_dict()}")
        sys.exit(1)


def print_status(message):
    """Print status messages to terminal only"""
    print(f"STATUS: {message}")
    logger.info(f"STATUS: {message}")


def ensure_directory(path):
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def read_text(filename, workdir="."):
    path = os.path.join(workdir, filename)
    if not os.path.exists(path):
        raise MissingInputError(f"{filename} not found", filename)
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return f.read()


def load_html(workdir=".", filename=INPUT_HTML):
    """Read the scraped page and parse it with the stdlib-backed html.parser."""
    content = read_text(filename, workdir)
    return BeautifulSoup(content, "html.parser")


def load_json(workdir=".", filename=INPUT_JSON):
    content = read_text(filename, workdir)
    if not content.strip():
        return {}
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Failed to parse {filename}: {e}", filename) from e


def read_seed(workdir=".", names=SEED_FILES):
    """Return the first readable seed file next to the input, or None."""
    for name in names:
        path = os.path.join(workdir, name)
        if not os.path.exists(path):
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                seed = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable seed file {name}: {e}")
            continue
        if isinstance(seed, dict):
            return seed
    return None


def seed_request_fields(seed):
    """Pick the request provenance fields a seed carries into emitted records."""
    if not seed:
        return {}
    fields = {}
    for key in ("source_http_request", "request_identifier"):
        if key in seed:
            fields[key] = seed[key]
    return fields


def dump_json(payload):
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_output(payload, filename, workdir=".", output_dir=None):
    """Write ``payload`` as pretty JSON under the output directory and return the path."""
    out_dir = os.path.join(workdir, output_dir or OUTPUT_DIR)
    ensure_directory(out_dir)
    out_path = os.path.join(out_dir, filename)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(dump_json(payload))
    logger.info(f"Wrote {out_path}")
    return out_path


def query_values(url):
    """Query parameters of ``url`` as ``{name: [values]}``.

    Hash-routed pages (``/#/parcel?parid=1``) carry their query inside the
    fragment; those values are appended after the regular query's.
    """
    values = {}
    if not url or not url.strip():
        return values
    parsed = urlparse(url)
    fragment_query = parsed.fragment.partition("?")[2]
    for query in (parsed.query, fragment_query):
        for name, found in parse_qs(query, keep_blank_values=True).items():
            values.setdefault(name, []).extend(found)
    return values
