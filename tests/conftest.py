import json
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


SAMPLE_MANIFEST = {
    "src/main.js": {
        "file": "assets/main.abc.js",
        "src": "src/main.js",
        "isEntry": True,
        "integrity": "sha384-main",
        "imports": ["_shared.js", "src/dep.js"],
        "css": ["assets/main.css"],
    },
    "src/dep.js": {
        "file": "assets/dep.def.js",
        "imports": ["_shared.js"],
        "css": ["assets/dep.css", "assets/shared.css"],
    },
    "_shared.js": {
        "file": "assets/shared.123.js",
        "css": ["assets/shared.css"],
    },
    "src/admin.js": {
        "file": "assets/admin.456.js",
        "isEntry": True,
        "dynamicImports": ["src/lazy.js"],
    },
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def manifest_data():
    """A copy of the sample manifest data."""
    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def manifest_file(temp_dir, manifest_data):
    """Write the sample manifest to a .vite/manifest.json file."""
    vite_dir = temp_dir / "dist" / ".vite"
    vite_dir.mkdir(parents=True)
    path = vite_dir / "manifest.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_configurations():
    """Clean configurations and settings sources before and after each test."""
    from viteioc.config.models import ViteAppConfig
    from viteioc.config.registry import clear_configurations
    clear_configurations()
    ViteAppConfig.clear_sources()
    yield
    clear_configurations()
    ViteAppConfig.clear_sources()
