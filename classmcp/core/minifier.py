"""
Class minification engine.

Maps semantic pattern ids (``btn-primary``) to the shortest free class names
(``a``, ``b``, ... ``Z``, ``aa``, ...) so generated markup carries one or two
characters per class instead of a long utility string.

Example:
    Original: class="inline-flex items-center justify-center px-4 py-2 bg-blue-600 text-white"
    Minified: class="a"
"""
import hashlib
import logging
import string
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set
from classmcp.catalog.loader import get_framework_config

log = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase
BASE = len(ALPHABET)

_ALPHABET_INDEX = {char: index for index, char in enumerate(ALPHABET)}


@dataclass(frozen=True)
class MinifiedClass:
    """One mapping record: semantic name, short name and the classes it stands for."""
    original: str
    minified: str
    classes: str
    hash: str


@dataclass
class MinificationMap:
    """Bidirectional semantic <-> minified name map for one minification pass."""
    name_to_minified: Dict[str, str] = field(default_factory=dict)
    minified_to_data: Dict[str, MinifiedClass] = field(default_factory=dict)
    used_names: Set[str] = field(default_factory=set)
    counter: int = 0

    # hash -> semantic names with that content; statistics only
    content_index: Dict[str, List[str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.minified_to_data)

    def entries(self) -> Iterator[MinifiedClass]:
        """Entries in insertion order."""
        return iter(self.minified_to_data.values())


@dataclass(frozen=True)
class MinificationSavings:
    total_original_tokens: int
    total_minified_tokens: int
    savings_percent: float
    avg_savings_per_class: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalOriginalTokens": self.total_original_tokens,
            "totalMinifiedTokens": self.total_minified_tokens,
            "savingsPercent": self.savings_percent,
            "avgSavingsPerClass": self.avg_savings_per_class,
        }


def hash_classes(classes: str) -> str:
    """Stable 32-bit content digest: the first 8 hex digits of MD5."""
    return hashlib.md5(classes.encode("utf-8")).hexdigest()[:8]


def generate_minified_name(counter: int) -> str:
    """
    Convert a sequence index into a short class name.

    Uses bijective base-52 numbering over a-z then A-Z, so all single letters
    come before any two-letter name: 0 -> a, 51 -> Z, 52 -> aa, 104 -> ba.

    Args:
        counter: Non-negative sequence index

    Returns:
        Class name of one or more ASCII letters
    """
    if counter < 0:
        raise ValueError(f"counter must be non-negative, got {counter}")

    chars = []
    n = counter
    while True:
        n, remainder = divmod(n, BASE)
        chars.append(ALPHABET[remainder])
        if n == 0:
            break
        # Leading digits have no zero symbol
        n -= 1
    return "".join(reversed(chars))


def decode_minified_name(name: str) -> int:
    """Inverse of generate_minified_name."""
    if not name:
        raise ValueError("minified name cannot be empty")

    value = 0
    for char in name:
        digit = _ALPHABET_INDEX.get(char)
        if digit is None:
            raise ValueError(f"invalid character {char!r} in minified name {name!r}")
        value = value * BASE + digit + 1
    return value - 1


def create_minification_map() -> MinificationMap:
    return MinificationMap()


def minify_class(class_map: MinificationMap, semantic_name: str, classes: str) -> MinifiedClass:
    """
    Add a pattern to the map, or return its existing entry.

    Re-minifying a known semantic name is a no-op: the stored entry comes back
    unchanged and the counter does not move. Distinct semantic names always get
    distinct short names, even when their classes are identical.

    Args:
        class_map: Map to update in place
        semantic_name: Pattern id, e.g. "btn-primary"
        classes: Resolved utility class string

    Returns:
        The MinifiedClass entry for semantic_name
    """
    existing = class_map.name_to_minified.get(semantic_name)
    if existing is not None:
        return class_map.minified_to_data[existing]

    content_hash = hash_classes(classes)

    minified = generate_minified_name(class_map.counter)
    class_map.counter += 1

    entry = MinifiedClass(
        original=semantic_name,
        minified=minified,
        classes=classes,
        hash=content_hash,
    )
    class_map.name_to_minified[semantic_name] = minified
    class_map.minified_to_data[minified] = entry
    class_map.used_names.add(minified)
    class_map.content_index.setdefault(content_hash, []).append(semantic_name)
    return entry


def get_minified(class_map: MinificationMap, semantic_name: str) -> Optional[str]:
    return class_map.name_to_minified.get(semantic_name)


def get_from_minified(class_map: MinificationMap, minified: str) -> Optional[MinifiedClass]:
    return class_map.minified_to_data.get(minified)


def find_shared_content(class_map: MinificationMap) -> Dict[str, List[str]]:
    """Hashes whose classes are shared by two or more semantic names."""
    return {
        content_hash: list(names)
        for content_hash, names in class_map.content_index.items()
        if len(names) > 1
    }


def generate_minified_css(
    class_map: MinificationMap,
    framework: str = "tailwind",
    include_comments: bool = True,
) -> str:
    """
    Render one CSS rule per entry, in insertion order.

    Frameworks whose custom class syntax is ``@apply`` get
    ``.a { @apply <classes>; }``. Every other framework, including ids outside
    the catalog such as "custom", gets a comment placeholder carrying the
    utility classes, since their raw CSS values are unknown here.
    """
    config = get_framework_config(framework)
    use_apply = config is not None and config.custom_class_syntax == "@apply"

    lines = []
    if include_comments:
        display_name = config.display_name if config else framework
        lines.append(f"/* classmcp minified classes - {display_name} */")
        lines.append(f"/* {len(class_map)} classes */")
        lines.append("")

    for entry in class_map.entries():
        if include_comments:
            lines.append(f"/* {entry.original} */")
        if use_apply:
            lines.append(f".{entry.minified} {{ @apply {entry.classes}; }}")
        else:
            lines.append(f".{entry.minified} {{ /* {entry.classes} */ }}")

    return "\n".join(lines) + "\n" if lines else ""


def calculate_savings(class_map: MinificationMap) -> MinificationSavings:
    """
    Compare identifier lengths before and after minification.

    Tokens are approximated by character counts of the semantic name versus
    the minified name, since those are what appear in generated markup.
    """
    count = len(class_map)
    total_original = sum(len(entry.original) for entry in class_map.entries())
    total_minified = sum(len(entry.minified) for entry in class_map.entries())

    if count == 0 or total_original == 0:
        return MinificationSavings(total_original, total_minified, 0.0, 0.0)

    savings_percent = (1 - total_minified / total_original) * 100
    avg_savings = (total_original - total_minified) / count
    return MinificationSavings(total_original, total_minified, savings_percent, avg_savings)


def export_map(class_map: MinificationMap) -> Dict[str, Any]:
    """Serialize the map as {"counter": int, "entries": [...]}."""
    return {
        "counter": class_map.counter,
        "entries": [asdict(entry) for entry in class_map.entries()],
    }


def import_map(data: Mapping[str, Any]) -> MinificationMap:
    """
    Rebuild a map from export_map output.

    Accepts the legacy key "mappings" in place of "entries". A later entry with
    an already-seen minified name replaces the earlier one. A counter lower
    than the highest imported name requires is raised so new names cannot
    collide with imported ones.

    Raises:
        ValueError: If an entry lacks original, minified or classes, or the
            counter is not an integer
    """
    raw_entries = data.get("entries")
    if raw_entries is None:
        raw_entries = data.get("mappings", [])

    class_map = MinificationMap()
    highest_index = -1
    for index, raw in enumerate(raw_entries):
        entry = raw if isinstance(raw, MinifiedClass) else _entry_from_raw(raw, index)

        replaced = class_map.minified_to_data.get(entry.minified)
        if replaced is not None:
            log.warning("Duplicate minified name %r on import; %r replaces %r",
                        entry.minified, entry.original, replaced.original)
            if class_map.name_to_minified.get(replaced.original) == entry.minified:
                del class_map.name_to_minified[replaced.original]
            _drop_from_content_index(class_map, replaced)

        previous = class_map.name_to_minified.get(entry.original)
        if previous is not None and previous != entry.minified:
            log.warning("Semantic name %r imported twice; keeping %r over %r",
                        entry.original, entry.minified, previous)
            stale = class_map.minified_to_data.pop(previous)
            class_map.used_names.discard(previous)
            _drop_from_content_index(class_map, stale)

        class_map.name_to_minified[entry.original] = entry.minified
        class_map.minified_to_data[entry.minified] = entry
        class_map.used_names.add(entry.minified)
        class_map.content_index.setdefault(entry.hash, []).append(entry.original)

        try:
            highest_index = max(highest_index, decode_minified_name(entry.minified))
        except ValueError:
            log.warning("Imported minified name %r is not a generated name", entry.minified)

    try:
        counter = int(data.get("counter", 0))
    except (TypeError, ValueError):
        raise ValueError(f"counter must be an integer, got {data.get('counter')!r}")
    if counter <= highest_index:
        log.warning("Imported counter %d is behind imported names; using %d",
                    counter, highest_index + 1)
        counter = highest_index + 1
    class_map.counter = counter
    return class_map


def _entry_from_raw(raw: Any, index: int) -> MinifiedClass:
    if not isinstance(raw, Mapping):
        raise ValueError(f"entry {index} must be an object, got {type(raw).__name__}")
    missing = [key for key in ("original", "minified", "classes") if not isinstance(raw.get(key), str)]
    if missing:
        raise ValueError(f"entry {index} is missing string field(s): {', '.join(missing)}")
    return MinifiedClass(
        original=raw["original"],
        minified=raw["minified"],
        classes=raw["classes"],
        hash=raw.get("hash") or hash_classes(raw["classes"]),
    )


def _drop_from_content_index(class_map: MinificationMap, entry: MinifiedClass) -> None:
    names = class_map.content_index.get(entry.hash)
    if not names:
        return
    if entry.original in names:
        names.remove(entry.original)
    if not names:
        del class_map.content_index[entry.hash]
