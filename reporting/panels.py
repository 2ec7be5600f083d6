# reporting/panels.py
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from jinja2 import DictLoader, Environment, select_autoescape

from domain.processors.models import Processor, RegistryStats
from domain.records.models import Record, StoreStats

STORE_STATS_J2 = """\
═══ MEMORY STATISTICS ═══
Total Memories: {{ stats.count }}/{{ stats.capacity }}
Total Saved: {{ stats.total_saved }}
Total Recalled: {{ stats.total_recalled }}
Memory Types:
{% for rtype, n in stats.by_type.items() %}
  - {{ rtype.label }}: {{ n }}
{% endfor %}
Memory Usage: {{ "%.1f" | format(stats.usage_percent) }}%
══════════════════════════
"""

STORE_LISTING_J2 = """\
═══ ALL MEMORIES ({{ records | length }}) ═══
{% for r in records %}
[{{ loop.index0 }}] {{ r.tag }} ({{ r.type.label }}) [{{ r.timestamp | when }}] (accessed {{ r.access_count }} times, importance {{ r.importance }})
    "{{ r.text }}"
{% endfor %}
═══════════════════════════
"""

PROCESSOR_LISTING_J2 = """\
═══ LOADED PLUGINS ({{ processors | length }}) ═══
Active: {{ stats.active_count }} | Total Loaded: {{ stats.total_loaded }}
{% for p in processors %}
[{{ loop.index0 }}] {{ p.name }} ({{ p.type.label }}) - {{ "ACTIVE" if p.is_active else "inactive" }}
    Description: {{ p.description }}
    Priority: {{ p.priority }}
{% endfor %}
══════════════════════════
"""


def _when(ts: float) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


_env = Environment(
    loader=DictLoader(
        {
            "store_stats.j2": STORE_STATS_J2,
            "store_listing.j2": STORE_LISTING_J2,
            "processor_listing.j2": PROCESSOR_LISTING_J2,
        }
    ),
    autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False, default=False),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["when"] = _when


def render_store_stats(stats: StoreStats) -> str:
    return _env.get_template("store_stats.j2").render(stats=stats)


def render_store_listing(records: Sequence[Record]) -> str:
    return _env.get_template("store_listing.j2").render(records=records)


def render_processor_listing(processors: Sequence[Processor], stats: RegistryStats) -> str:
    return _env.get_template("processor_listing.j2").render(processors=processors, stats=stats)
