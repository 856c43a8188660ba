# volley_core/config.py
from __future__ import annotations
import logging
import os
from typing import Optional

import yaml

from .models import AppConfig

CONFIG_ENV = "VOLLEY_PLANNER_CONFIG"
LOG_LEVEL_ENV = "VOLLEY_PLANNER_LOG_LEVEL"

# ===== App defaults =====
DEFAULT_CONFIG = {
    "team_name": "11-Player Rotation",
    "start_rotation": 1,
    "default_view": "court",         # court | table
    "log_level": "INFO",
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_config(path: Optional[str] = None) -> AppConfig:
    """
    Defaults, overlaid by the YAML file at `path` (or $VOLLEY_PLANNER_CONFIG),
    overlaid by $VOLLEY_PLANNER_LOG_LEVEL.
    """
    data = dict(DEFAULT_CONFIG)
    path = path or os.environ.get(CONFIG_ENV)
    if path:
        with open(path, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
        if not isinstance(obj, dict):
            raise ValueError(f"Config {path} must be a mapping of settings.")
        unknown = sorted(k for k in obj if k not in DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {unknown}")
        data.update(obj)
    if os.environ.get(LOG_LEVEL_ENV):
        data["log_level"] = os.environ[LOG_LEVEL_ENV]
    return AppConfig(**data)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

# ===== Court theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<style>
:root{
  --court:#ffedd5; --court-line:#fdba74; --net:#ffffff;
  --seat:rgba(255,255,255,.92); --seat-line:#fed7aa;
  --serve:#fef9c3; --serve-line:#facc15;
  --bench:#f3f4f6; --bench-line:#d1d5db;
  --chip:#2563eb; --chip-libero:#16a34a; --chip-bench:#6b7280;
  --text:#1f2937; --sub:#6b7280;
  --radius:12px;
}
.block-container { padding-top: 1rem; max-width: 1100px; }

.court{
  background: var(--court); border:4px solid var(--court-line);
  border-radius: var(--radius) var(--radius) 0 0; padding:12px;
}
.net{ text-align:center; font-size:10px; color:#fff; background:var(--court-line);
  border-radius:999px; margin:4px auto 10px; width:160px; }
.court-grid{ display:grid; grid-template-columns:repeat(3, 1fr); gap:8px; }
.seat{
  background: var(--seat); border:2px solid var(--seat-line); border-radius:10px;
  padding:8px 6px; text-align:center; min-height:92px; position:relative;
}
.seat.serve{ background: var(--serve); border-color: var(--serve-line); }
.seat .tag{ position:absolute; top:2px; left:6px; font-size:10px; font-weight:700; color:#fb923c; }
.seat .serve-tag{ position:absolute; top:2px; right:6px; font-size:10px; font-weight:700;
  color:#a16207; background:#fde68a; padding:0 4px; border-radius:4px; }
.chip{
  width:36px; height:36px; border-radius:999px; margin:10px auto 4px;
  display:flex; align-items:center; justify-content:center;
  color:#fff; font-weight:700; background: var(--chip);
}
.chip.libero{ background: var(--chip-libero); }
.chip.bench{ background: var(--chip-bench); width:30px; height:30px; font-size:13px; }
.pname{ font-size:13px; font-weight:700; color:var(--text);
  white-space:nowrap; overflow:hidden; text-overflow:ellipsis; }
.empty{ color:#9ca3af; font-size:12px; margin-top:24px; }

.bench-area{
  background: var(--bench); border:4px solid var(--bench-line); border-top:none;
  border-radius: 0 0 var(--radius) var(--radius); padding:10px 12px;
}
.bench-title{ font-size:12px; font-weight:700; color:var(--sub); text-transform:uppercase; }
.bench-row{ display:flex; gap:8px; overflow-x:auto; padding-top:6px; }
.bench-seat{ width:76px; flex-shrink:0; background:#fff; border:1px solid var(--bench-line);
  border-radius:6px; padding:6px 4px; text-align:center; position:relative; font-size:11px; }
.bench-seat .tag{ position:absolute; top:1px; left:4px; font-size:10px; color:#9ca3af; }

.flow{ margin-top:12px; padding:10px; background:#eff6ff; color:#1e40af;
  border:1px solid #dbeafe; border-radius:6px; font-size:12px; }
.caption { color: var(--sub); font-size: 12px; margin-top: 6px }
</style>
"""
