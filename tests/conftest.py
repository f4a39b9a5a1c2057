"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from sii_catalog.config import CatalogConfig

ENGINE_TEMPLATE = """SiiNunit
{{
accessory_engine_data : {code}.engine
{{
\tname: "{name}"
\tprice: 20000
\tinfo[]: "{power} @@hp@@ ({kw}@@kw@@)"
\ttorque: {torque}
\trpm_limit: 2300
}}
}}
"""

TRANSMISSION_TEMPLATE = """SiiNunit
{{
accessory_transmission_data : {code}.transmission
{{
\tname: "{name}"
\tdifferential_ratio: 2.59
{ratios}{retarder}}}
}}
"""


def engine_text(name="DC13 450", power="450", torque="2350", code="dc13"):
    return ENGINE_TEMPLATE.format(
        code=code, name=name, power=power, kw=int(int(power) * 0.7355), torque=torque
    )


def transmission_text(name="GRS905", ratios=("11.32", "1.00"), retarder=False, code="grs905"):
    ratio_lines = "".join(f"\tratios_forward[]: {r}\n" for r in ratios)
    return TRANSMISSION_TEMPLATE.format(
        code=code,
        name=name,
        ratios=ratio_lines,
        retarder="\tretarder: 4\n" if retarder else "",
    )


def write_model(root: Path, folder: str, engines=None, transmissions=None) -> Path:
    """Create a brand.model folder with engine/transmission definition files."""
    model_dir = root / folder
    model_dir.mkdir(parents=True)
    if engines is not None:
        (model_dir / "engine").mkdir()
        for file_name, text in engines.items():
            (model_dir / "engine" / file_name).write_bytes(text.encode("utf-8"))
    if transmissions is not None:
        (model_dir / "transmission").mkdir()
        for file_name, text in transmissions.items():
            (model_dir / "transmission" / file_name).write_bytes(text.encode("utf-8"))
    return model_dir


@pytest.fixture
def fixtures_dir():
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def engine_fixture(fixtures_dir):
    """Return path to the sample engine definition."""
    return fixtures_dir / "scania.r_2016" / "engine" / "dc13_450.sii"


@pytest.fixture
def transmission_fixture(fixtures_dir):
    """Return path to the sample transmission definition."""
    return fixtures_dir / "scania.r_2016" / "transmission" / "grso905r.sii"


@pytest.fixture
def truck_tree(tmp_path):
    """
    Build a small def/vehicle/truck tree.

    - scania.r_2016: two engines (one CRLF), one transmission -> kept
    - scania.s_2016: one engine, one transmission -> kept (same brand)
    - volvo.fh16: one engine, one transmission with retarder -> kept
    - daf.xf: engines only -> dropped
    - mercedes: no brand.model dot -> dropped
    """
    root = tmp_path / "def" / "vehicle" / "truck"
    root.mkdir(parents=True)

    write_model(
        root,
        "scania.r_2016",
        engines={
            "dc13_450.sii": engine_text("DC13 148 450", "450", "2350"),
            "dc16_730.sii": engine_text("DC16 730", "730", "3500").replace("\n", "\r\n"),
            "readme.txt": "not a definition\n",
        },
        transmissions={
            "grso905r.sii": transmission_text("GRSO905R", ("11.32", "9.16", "1.00"), True),
        },
    )
    write_model(
        root,
        "scania.s_2016",
        engines={"dc13_500.sii": engine_text("DC13 500", "500", "2550")},
        transmissions={"grso925.sii": transmission_text("GRSO925", ("16.41", "1.00"))},
    )
    write_model(
        root,
        "volvo.fh16",
        engines={"d16k_750.sii": engine_text("D16K750", "750", "3550")},
        transmissions={"at2612f.sii": transmission_text("AT2612F", ("14.94", "1.00"), True)},
    )
    write_model(root, "daf.xf", engines={"mx13.sii": engine_text("MX-13 390", "530", "2600")})
    write_model(
        root,
        "mercedes",
        engines={"om471.sii": engine_text("OM471", "510", "2500")},
        transmissions={"g281.sii": transmission_text("G281", ("14.93", "1.00"))},
    )
    return root


@pytest.fixture
def tree_config(truck_tree, tmp_path):
    """Scan configuration pointing at the sample tree."""
    return CatalogConfig(root=truck_tree, output=tmp_path / "out" / "trucks.json")
