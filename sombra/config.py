import logging
import os
from pathlib import Path

import yaml

from sombra.errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).with_name("sombra_config.yaml")
ENV_VAR = "SOMBRA_CONFIG"

SUN_PROVIDERS = ("suncalc", "astral")
DISPLACEMENTS = ("haversine", "geod")


def read_yaml(p: Path):
    if not p.exists():
        raise ConfigError(f"Falta archivo de configuración: {p}")
    try:
        data = yaml.safe_load(p.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML inválido: {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Se espera un mapa de opciones en {p}")
    return data


def load_config(path=None):
    src = path or os.getenv(ENV_VAR)
    cfg = read_yaml(DEFAULT_PATH)
    if src:
        log.info("sombra: configuración desde %s", src)
        cfg.update(read_yaml(Path(src)))

    try:
        out = {
            "sun_provider": str(cfg.get("sun_provider", "suncalc")).lower(),
            "with_refraction": cfg.get("with_refraction", True),
            "displacement": str(cfg.get("displacement", "haversine")).lower(),
            "earth_radius_m": float(cfg.get("earth_radius_m", 6371000.0)),
            "geod_ellps": str(cfg.get("geod_ellps", "WGS84")),
            "min_altitude_deg": float(cfg.get("min_altitude_deg", 0.0)),
        }
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Valor inválido en configuración: {e}") from e

    if not isinstance(out["with_refraction"], bool):
        raise ConfigError(f"with_refraction debe ser true o false: {out['with_refraction']!r}")
    if out["sun_provider"] not in SUN_PROVIDERS:
        raise ConfigError(f"sun_provider desconocido: {out['sun_provider']!r}")
    if out["displacement"] not in DISPLACEMENTS:
        raise ConfigError(f"displacement desconocido: {out['displacement']!r}")
    if out["earth_radius_m"] <= 0:
        raise ConfigError(f"earth_radius_m debe ser > 0: {out['earth_radius_m']}")
    return out
