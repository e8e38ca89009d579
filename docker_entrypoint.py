import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional


def ensure_data_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Create the settings directory so the first settings save cannot fail."""
    env = os.environ if env is None else env
    data_dir = Path(env.get("EVENT_DASHBOARD_DATA_DIR", "data"))
    if not data_dir.exists():
        print(f"[event-dashboard] Creating data directory at {data_dir}...")
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def build_streamlit_args(env: Optional[Mapping[str, str]] = None) -> List[str]:
    env = os.environ if env is None else env
    port = env.get("STREAMLIT_SERVER_PORT", "8501")
    address = env.get("STREAMLIT_SERVER_ADDRESS", "0.0.0.0")

    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        "app.py",
        "--server.port",
        str(port),
        "--server.address",
        str(address),
    ]


def main() -> None:
    ensure_data_dir()
    args = build_streamlit_args()
    os.execvp(args[0], args)


if __name__ == "__main__":
    main()
