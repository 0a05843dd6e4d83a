#!/usr/bin/python3

### Kill policy for resource pressure: when asked to act, pick the
### cgroup generating the most io cost among the configured cgroups
### and kill it, then hold off for a while to let the system recover.
### Project home: https://github.com/tobixen/thrash-protect

### Deciding *when* to act is somebody else's job (the pressure
### detector calling run()), and so is the actual process killing
### (a KillMechanism subclass).  This module only decides *what*.

__version__ = "0.1.0"
__author__ = "Tobias Brox"
__copyright__ = "Copyright 2013-2026, Tobias Brox"
__license__ = "GPL"
__maintainer__ = "Tobias Brox"
__email__ = "tobias@redpill-linpro.com"
__product__ = "kill-iocost"

import argparse
import configparser
import functools
import json
import logging
import os
import re
import sys
import threading
import time
import uuid
from collections import namedtuple
from enum import Enum
from os import getenv

# Optional imports with graceful fallback
try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False

try:
    import tomllib  # Python 3.11+

    HAS_TOML = True
except ImportError:
    try:
        import tomli as tomllib  # Fallback for older Python

        HAS_TOML = True
    except ImportError:
        HAS_TOML = False


DEFAULT_CGROUP_FS = "/sys/fs/cgroup"

## values accepted as "true" for the dry and debug plugin arguments
TRUE_VALUES = ("true", "True", "1")

## plain ascii decimal, optionally signed - no "1_000", no "1.5"
DECIMAL_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
MAX_POST_ACTION_DELAY = int(threading.TIMEOUT_MAX)


#########################
## Data model
#########################


class CgroupPath(namedtuple("CgroupPath", ("cgroup_fs", "relative_path"))):
    """A monitored cgroup, identified by the cgroup filesystem root and
    a path relative to it.  The root cgroup has an empty relative path.
    """

    __slots__ = ()

    @property
    def absolute_path(self):
        if not self.relative_path:
            return self.cgroup_fs
        return os.path.join(self.cgroup_fs, self.relative_path)

    @property
    def parent(self):
        """The parent cgroup, or None for the root."""
        if not self.relative_path:
            return None
        return CgroupPath(self.cgroup_fs, os.path.dirname(self.relative_path))

    def is_descendant_of(self, other):
        """True if this cgroup is other, or lives somewhere below it."""
        if self.cgroup_fs != other.cgroup_fs:
            return False
        if not other.relative_path:
            return True
        return self.relative_path == other.relative_path or self.relative_path.startswith(other.relative_path + "/")


def resolve_cgroup(cgroup_fs, name):
    """Turn an operator supplied cgroup name (like "system.slice/foo.service")
    into a CgroupPath below cgroup_fs.  Redundant slashes are dropped.
    """
    relative_path = "/".join(part for part in name.strip().split("/") if part)
    return CgroupPath(cgroup_fs.rstrip("/") or "/", relative_path)


## current_usage and swap_usage are in bytes, memory_pressure is the
## "some avg10" percentage.  Only current_usage and io_cost_rate matter
## for picking a victim, the rest is for the context dump.
CgroupMetrics = namedtuple(
    "CgroupMetrics",
    ("current_usage", "io_cost_rate", "swap_usage", "memory_pressure"),
    defaults=(0, 0.0, 0, 0.0),
)

Candidate = namedtuple("Candidate", ("cgroup", "metrics"))

## What triggered the action - passed through to the kill log untouched
ActionContext = namedtuple("ActionContext", ("ruleset", "detectorgroup"), defaults=("", ""))

EvaluationContext = namedtuple("EvaluationContext", ("snapshot", "action_context"), defaults=(ActionContext(),))

PolicyConfig = namedtuple(
    "PolicyConfig",
    ("cgroups", "post_action_delay", "dry", "debug"),
    defaults=(0, False, False),
)


class Snapshot:
    """Read-only view of all monitored cgroups at one point of time.

    The monitor should hand a fresh snapshot to every evaluation.
    Nothing in here is changed after construction, so a monitor
    refreshing its own state concurrently can't confuse the ranking.
    mem_total and swap_total (bytes) are only used to decide what is
    negligible when dumping the context.
    """

    def __init__(self, cgroups=(), mem_total=0, swap_total=0):
        if hasattr(cgroups, "items"):
            cgroups = cgroups.items()
        ## dict keeps the first position of a duplicated path
        self._metrics = dict((cgroup, CgroupMetrics(*metrics)) for cgroup, metrics in cgroups)
        self._cgroups = tuple(self._metrics)
        self.mem_total = mem_total
        self.swap_total = swap_total

    def __len__(self):
        return len(self._cgroups)

    def __contains__(self, cgroup):
        return cgroup in self._metrics

    def get(self, cgroup):
        return self._metrics.get(cgroup)

    def rankable(self):
        """All cgroups as candidates, in monitor order.  A new list every call."""
        return [Candidate(cgroup, self._metrics[cgroup]) for cgroup in self._cgroups]

    def siblings_of(self, cgroup):
        """Monitored cgroups sharing the immediate parent of cgroup."""
        parent = cgroup.parent
        if parent is None:
            return set()
        return set(other for other in self._cgroups if other != cgroup and other.parent == parent)

    @classmethod
    def from_dict(cls, data, cgroup_fs=DEFAULT_CGROUP_FS):
        """Build a snapshot from the layout used by snapshot files:

            {"mem_total": 16000000000, "swap_total": 0,
             "cgroups": {"system.slice/foo.service":
                            {"current_usage": 1048576, "io_cost_rate": 12.5}}}

        Missing metrics default to 0.  Raises ValueError on malformed input.
        """
        if not isinstance(data, dict):
            raise ValueError("snapshot must be a mapping")
        cgroups = data.get("cgroups", {})
        if not isinstance(cgroups, dict):
            raise ValueError("'cgroups' must map cgroup paths to metrics")

        entries = []
        for name, fields in cgroups.items():
            if not isinstance(fields, dict):
                raise ValueError(f"metrics for {name} must be a mapping")
            unknown = set(fields) - set(CgroupMetrics._fields)
            if unknown:
                raise ValueError(f"unknown metrics for {name}: {', '.join(sorted(unknown))}")
            try:
                metrics = CgroupMetrics(
                    current_usage=int(fields.get("current_usage", 0)),
                    io_cost_rate=float(fields.get("io_cost_rate", 0.0)),
                    swap_usage=int(fields.get("swap_usage", 0)),
                    memory_pressure=float(fields.get("memory_pressure", 0.0)),
                )
            except (TypeError, ValueError) as e:
                raise ValueError(f"invalid metrics for {name}: {e}")
            entries.append((resolve_cgroup(cgroup_fs, name), metrics))

        try:
            mem_total = int(data.get("mem_total", 0))
            swap_total = int(data.get("swap_total", 0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid memory totals: {e}")
        return cls(entries, mem_total=mem_total, swap_total=swap_total)


def load_snapshot(path, cgroup_fs=DEFAULT_CGROUP_FS):
    """Load a snapshot from a JSON file (see Snapshot.from_dict)."""
    with open(path) as f:
        data = json.load(f)
    return Snapshot.from_dict(data, cgroup_fs)


#########################
## Plugin arguments
#########################


class ConfigError(ValueError):
    """Raised by init() when the plugin arguments are unusable.  The
    policy must not be installed when this happens.
    """

    MISSING_REQUIRED_OPTION = "missing_required_option"
    INVALID_VALUE = "invalid_value"

    def __init__(self, kind, option, message):
        super().__init__(message)
        self.kind = kind
        self.option = option


def _parse_bool(value):
    return value in TRUE_VALUES


def parse_policy_config(args, cgroup_fs=DEFAULT_CGROUP_FS):
    """Build a PolicyConfig from the plugin arguments (a str -> str mapping).

    Recognised arguments: cgroup (required, comma separated),
    post_action_delay (non-negative integer seconds), dry and debug.
    """
    names = [name for name in args.get("cgroup", "").split(",") if name.strip()]
    if not names:
        logging.error("Argument=cgroup not present")
        raise ConfigError(ConfigError.MISSING_REQUIRED_OPTION, "cgroup", "Argument=cgroup not present")
    cgroups = frozenset(resolve_cgroup(cgroup_fs, name) for name in names)

    post_action_delay = 0
    if "post_action_delay" in args:
        value = args["post_action_delay"]
        if not isinstance(value, str) or not DECIMAL_RE.fullmatch(value):
            logging.error("Argument=post_action_delay must be an integer, got %r" % (value,))
            raise ConfigError(
                ConfigError.INVALID_VALUE, "post_action_delay", "Argument=post_action_delay must be an integer"
            )
        post_action_delay = int(value)
        if post_action_delay < 0:
            logging.error("Argument=post_action_delay must be non-negative")
            raise ConfigError(
                ConfigError.INVALID_VALUE, "post_action_delay", "Argument=post_action_delay must be non-negative"
            )
        ## time.sleep() can't wait longer than this
        if post_action_delay > MAX_POST_ACTION_DELAY:
            logging.error("Argument=post_action_delay must be at most %d" % MAX_POST_ACTION_DELAY)
            raise ConfigError(
                ConfigError.INVALID_VALUE,
                "post_action_delay",
                "Argument=post_action_delay must be at most %d" % MAX_POST_ACTION_DELAY,
            )

    return PolicyConfig(
        cgroups=cgroups,
        post_action_delay=post_action_delay,
        dry=_parse_bool(args.get("dry")),
        debug=_parse_bool(args.get("debug")),
    )


#########################
## Configuration sources
#########################

# Default config file search paths (in order of preference)
CONFIG_SEARCH_PATHS = [
    "/etc/kill-iocost.yaml",
    "/etc/kill-iocost.yml",
    "/etc/kill-iocost.toml",
    "/etc/kill-iocost.json",
    "/etc/kill-iocost.conf",
]

CONFIG_SECTION = "kill-iocost"

# Each entry: plugin argument -> (env_var_name, file_key_aliases)
CONFIG_SCHEMA = {
    "cgroup": ("KILL_IOCOST_CGROUP", ["cgroups"]),
    "post_action_delay": ("KILL_IOCOST_POST_ACTION_DELAY", ["post-action-delay"]),
    "dry": ("KILL_IOCOST_DRY", ["dry-run", "dry_run"]),
    "debug": ("KILL_IOCOST_DEBUG", []),
    "cgroup_fs": ("KILL_IOCOST_CGROUP_FS", ["cgroup-fs"]),
}


def _to_arg_string(value):
    """Plugin arguments are always strings; flatten file values into one."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(x) for x in value)
    return str(value)


def _read_yaml(f):
    if not HAS_YAML:
        raise ImportError("PyYAML not installed - install with: pip install PyYAML")
    return yaml.safe_load(f)


def _read_toml(f):
    if not HAS_TOML:
        raise ImportError("TOML support not available - install tomli (Python <3.11) or use Python 3.11+")
    return tomllib.loads(f.read())


def _read_ini(f):
    parser = configparser.ConfigParser()
    parser.read_file(f)
    if CONFIG_SECTION not in parser:
        return {}
    return {CONFIG_SECTION: dict(parser[CONFIG_SECTION])}


## extension -> reader; anything else is read as INI
CONFIG_READERS = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
    ".json": json.load,
}

CONFIG_FILE_ERRORS = (OSError, ValueError, configparser.Error)
if HAS_YAML:
    CONFIG_FILE_ERRORS += (yaml.YAMLError,)


def _plugin_section(document):
    """The kill-iocost section of a config document, or the whole
    document if it has no such section.  Empty documents give {}.
    """
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError("expected a mapping at the top level, got %s" % type(document).__name__)
    section = document.get(CONFIG_SECTION, document)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError("expected a mapping in section %s, got %s" % (CONFIG_SECTION, type(section).__name__))
    return section


def load_from_file(path=None):
    """Load the plugin section of the first config file found
    (the format is picked by file extension).  Files that can't be
    read or parsed are skipped with a warning.
    """
    for filepath in [path] if path else CONFIG_SEARCH_PATHS:
        if not os.path.exists(filepath):
            continue
        reader = CONFIG_READERS.get(os.path.splitext(filepath)[1].lower(), _read_ini)
        try:
            with open(filepath) as f:
                return _plugin_section(reader(f))
        except ImportError as e:
            logging.warning("Config format not supported for %s: %s" % (filepath, e))
        except CONFIG_FILE_ERRORS as e:
            logging.warning("Failed to load config from %s: %s" % (filepath, e))
    return {}


def load_from_env():
    """Load plugin arguments from environment variables."""
    env_config = {}
    for arg_name, (env_var, _) in CONFIG_SCHEMA.items():
        value = getenv(env_var)
        if value is not None:
            env_config[arg_name] = value
    return env_config


def normalize_file_config(file_config):
    """Map file keys onto plugin argument names and stringify the values.

    Unknown keys are passed through (hyphens replaced by underscores);
    the policy ignores arguments it doesn't recognise.  Keys without a
    value (like a bare "cgroup:" in YAML) count as not set.
    """
    file_key_to_arg = {}
    for arg_name, (_, aliases) in CONFIG_SCHEMA.items():
        for alias in aliases:
            file_key_to_arg[alias] = arg_name

    normalized = {}
    for key, value in file_config.items():
        if value is None:
            continue
        norm_key = file_key_to_arg.get(key, key.replace("-", "_"))
        normalized[norm_key] = _to_arg_string(value)
    return normalized


def load_plugin_args(args=None):
    """Merge plugin arguments from file <- env <- CLI.

    Priority order (highest to lowest):
    1. CLI arguments
    2. Environment variables
    3. Config file
    """
    if args is None:
        args = argparse.Namespace()

    final = {}

    file_config = load_from_file(getattr(args, "config", None))
    if file_config:
        final.update(normalize_file_config(file_config))

    final.update(load_from_env())

    for arg_name in CONFIG_SCHEMA:
        value = getattr(args, arg_name, None)
        if value is not None:
            final[arg_name] = _to_arg_string(value)

    return final


#########################
## Logging helpers
#########################


def ignore_failure(method):
    """Log exceptions from method as critical instead of raising them."""

    @functools.wraps(method)
    def _try_except_pass(*args, **kwargs):
        try:
            method(*args, **kwargs)
        except Exception:
            logging.critical("Exception ignored in %s" % method.__name__, exc_info=True)

    return _try_except_pass


def _is_negligible(metrics, mem_total, swap_total):
    ## below 1% pressure and 0.1% of memory and swap
    return (
        metrics.memory_pressure < 1.0
        and metrics.current_usage <= mem_total // 1000
        and metrics.swap_usage <= swap_total // 1000
    )


def dump_context(candidates, skip_negligible=False, mem_total=0, swap_total=0):
    """Log one line per candidate, in the given order."""
    logging.info("Dumping cgroup context:")
    for cgroup, metrics in candidates:
        if skip_negligible and _is_negligible(metrics, mem_total, swap_total):
            continue
        logging.info(
            "name=%s current_usage=%s swap_usage=%s io_cost_rate=%s memory_pressure=%.2f"
            % (
                cgroup.relative_path,
                metrics.current_usage,
                metrics.swap_usage,
                metrics.io_cost_rate,
                metrics.memory_pressure,
            )
        )


#########################
## Kill mechanism
#########################


def generate_kill_id():
    return str(uuid.uuid4())


class KillMechanism:
    """Base class for the things actually killing a cgroup.

    Subclasses implement kill_cgroup().  Dry-run handling, kill ids and
    the kill log line are shared here, so that every policy reports a
    kill the same way.
    """

    def kill_cgroup(self, path, recursive):
        """Kill the processes in the cgroup at path (and below it, if
        recursive).  Returns True if anything was killed.
        """
        raise NotImplementedError()

    def try_to_kill_cgroup(self, path, recursive=True, dry=False):
        """Returns a kill id on success, None if nothing got killed.

        A failure is an expected outcome (the cgroup may be gone
        already) and is never raised to the caller.
        """
        if dry:
            logging.info("In dry-run mode; would have tried to kill %s" % path)
            return generate_kill_id()
        try:
            killed = self.kill_cgroup(path, recursive)
        except OSError as e:
            logging.warning("Failed to kill cgroup %s: %s" % (path, e))
            return None
        if not killed:
            logging.debug("nothing killed in %s" % path)
            return None
        return generate_kill_id()

    def log_kill(self, cgroup, metrics, action_context, kill_id, dry=False):
        logging.info(
            "%s: %s (%sMB) io_cost_rate=%s ruleset=%s detectorgroup=%s kill_id=%s"
            % (
                "would have killed" if dry else "killed",
                cgroup.relative_path,
                metrics.current_usage // 1024 // 1024,
                metrics.io_cost_rate,
                action_context.ruleset,
                action_context.detectorgroup,
                kill_id,
            )
        )


#########################
## Cooldown
#########################


class Cooldown:
    """Holds off further action for a number of seconds after a kill,
    giving the system time to show the effect of the kill.

    clock and sleep are injectable so that tests don't have to wait.
    """

    def __init__(self, delay=0, clock=time.monotonic, sleep=time.sleep):
        self.delay = delay
        self.clock = clock
        self.sleep = sleep
        self.until = None

    def start(self):
        self.until = self.clock() + self.delay

    def remaining(self):
        if self.until is None:
            return 0
        return max(0, self.until - self.clock())

    def active(self):
        return self.remaining() > 0

    def wait(self):
        """Block until the cooldown has passed.  Not interruptible."""
        remaining = self.remaining()
        if remaining > 0:
            logging.debug("post action delay - sleeping %s seconds" % remaining)
            self.sleep(remaining)


#########################
## Kill policies
#########################


class PluginRet(Enum):
    """What the policy chain should do after a policy has run."""

    CONTINUE = 0  ## nothing was done, let the next policy try
    STOP = 1  ## something was killed, stop the chain for this round


def rank_by_io_cost(snapshot):
    """Candidates with the highest io cost rate first.  Ties are ordered
    by relative path, so the result doesn't depend on monitor order.
    """
    return sorted(
        snapshot.rankable(),
        key=lambda candidate: (-candidate.metrics.io_cost_rate, candidate.cgroup.relative_path),
    )


def remove_sibling_cgroups(ours, candidates, snapshot):
    """Drop candidates that are siblings of one of our cgroups, unless
    they are one of ours or below one of ours.  Everything else is kept.
    Returns a new list.
    """
    siblings = set()
    for our in ours:
        siblings.update(snapshot.siblings_of(our))

    def in_scope(cgroup):
        return any(cgroup.is_descendant_of(our) for our in ours)

    return [candidate for candidate in candidates if candidate.cgroup not in siblings or in_scope(candidate.cgroup)]


class KillPolicy:
    """Base class for kill policies.

    A policy is initialized once with the plugin arguments (init()),
    and then run() is called every time the pressure detector decides
    something should be done.  Subclasses supply rank(); walking the
    candidates, killing, logging and the cooldown are shared.

    With blocking=False the cooldown doesn't sleep.  Instead run()
    returns STOP without doing anything until the cooldown has passed,
    leaving it to the caller to not spin.
    """

    def __init__(self, kill_mechanism=None, clock=time.monotonic, sleep=time.sleep, blocking=True):
        self.kill_mechanism = kill_mechanism or KillMechanism()
        self.clock = clock
        self.sleep = sleep
        self.blocking = blocking
        self.config = None
        self.cooldown = None

    def init(self, args, cgroup_fs=DEFAULT_CGROUP_FS):
        """Parse the plugin arguments.  Raises ConfigError."""
        self.config = parse_policy_config(args, cgroup_fs)
        self.cooldown = Cooldown(self.config.post_action_delay, clock=self.clock, sleep=self.sleep)
        logging.debug(
            "%s initialized - cgroups: %s, post_action_delay: %s, dry: %s"
            % (
                type(self).__name__,
                sorted(cgroup.relative_path for cgroup in self.config.cgroups),
                self.config.post_action_delay,
                self.config.dry,
            )
        )
        return self.config

    def rank(self, snapshot):
        raise NotImplementedError()

    def select(self, snapshot):
        """Ranked candidates that are within scope."""
        ranked = self.rank(snapshot)
        if self.config.debug:
            dump_context(ranked, False, snapshot.mem_total, snapshot.swap_total)
            logging.info("Removed sibling cgroups")
        candidates = remove_sibling_cgroups(self.config.cgroups, ranked, snapshot)
        dump_context(candidates, not self.config.debug, snapshot.mem_total, snapshot.swap_total)
        return candidates

    def pick_message(self, candidate):
        raise NotImplementedError()

    def try_to_kill_something(self, context):
        """Try the candidates in order until one gets killed.

        Returns True if something was killed.
        """
        for candidate in self.select(context.snapshot):
            logging.info(self.pick_message(candidate))
            kill_id = self.kill_mechanism.try_to_kill_cgroup(candidate.cgroup.absolute_path, True, self.config.dry)
            if kill_id:
                self._log_kill(candidate, context.action_context, kill_id)
                return True
        logging.debug("found nothing to kill")
        return False

    @ignore_failure
    def _log_kill(self, candidate, action_context, kill_id):
        ## the kill already happened - a broken kill log must not change that
        self.kill_mechanism.log_kill(candidate.cgroup, candidate.metrics, action_context, kill_id, self.config.dry)

    def run(self, context):
        if self.config is None:
            raise RuntimeError("%s.run() called before a successful init()" % type(self).__name__)
        if self.cooldown.active():
            logging.debug("in post action delay for another %s seconds" % self.cooldown.remaining())
            return PluginRet.STOP

        if not self.try_to_kill_something(context):
            return PluginRet.CONTINUE

        self.cooldown.start()
        if self.blocking:
            self.cooldown.wait()
        return PluginRet.STOP


class KillIOCost(KillPolicy):
    """Kills the cgroup generating the most io cost."""

    def rank(self, snapshot):
        return rank_by_io_cost(snapshot)

    def pick_message(self, candidate):
        return 'Picked "%s" (%sMB) based on io cost generation at %s' % (
            candidate.cgroup.relative_path,
            candidate.metrics.current_usage // 1024 // 1024,
            candidate.metrics.io_cost_rate,
        )


#########################
## Command line
#########################


def create_argument_parser():
    """Create argument parser with all configuration options."""
    p = argparse.ArgumentParser(
        description="Show which cgroup the kill_by_io_cost policy would kill, given a snapshot of cgroup metrics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration priority (highest to lowest):
  1. Command-line arguments
  2. Environment variables (KILL_IOCOST_*)
  3. Config file (--config or auto-detected)

Config file search order (first found is used):
  /etc/kill-iocost.yaml
  /etc/kill-iocost.yml
  /etc/kill-iocost.toml
  /etc/kill-iocost.json
  /etc/kill-iocost.conf

The policy always runs in dry mode from the command line.

Example usage:
  kill-iocost --snapshot=snapshot.json --cgroup=workload.slice,system.slice
  kill-iocost --config=/path/to/config.yaml --snapshot=snapshot.json --debug
""",
    )

    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    p.add_argument(
        "--config",
        "-c",
        metavar="PATH",
        help="Configuration file path (auto-detects format by extension)",
    )
    p.add_argument(
        "--snapshot",
        "-s",
        metavar="PATH",
        required=True,
        help="JSON file with the cgroup metrics to evaluate",
    )
    p.add_argument(
        "--cgroup",
        metavar="CGROUPS",
        help="Comma separated list of cgroups to police",
    )
    p.add_argument(
        "--post-action-delay",
        dest="post_action_delay",
        metavar="SECONDS",
        help="Seconds to hold off after a kill (default: 0)",
    )
    p.add_argument(
        "--cgroup-fs",
        dest="cgroup_fs",
        metavar="PATH",
        help=f"Cgroup filesystem root (default: {DEFAULT_CGROUP_FS})",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging and dump all cgroups, including negligible ones",
    )
    return p


def main(argv=None):
    """Main entry point for kill-iocost."""
    p = create_argument_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(message)s")

    plugin_args = load_plugin_args(args)
    cgroup_fs = plugin_args.pop("cgroup_fs", DEFAULT_CGROUP_FS)
    plugin_args["dry"] = "true"

    policy = KillIOCost(blocking=False)
    try:
        policy.init(plugin_args, cgroup_fs)
    except ConfigError:
        return 1

    try:
        snapshot = load_snapshot(args.snapshot, cgroup_fs)
    except (OSError, ValueError) as e:
        logging.error("Failed to load snapshot from %s: %s" % (args.snapshot, e))
        return 1

    ret = policy.run(EvaluationContext(snapshot, ActionContext(ruleset="command line", detectorgroup="snapshot")))
    if ret is PluginRet.STOP:
        return 0
    logging.info("nothing to kill found")
    return 2


if __name__ == "__main__":
    sys.exit(main())
