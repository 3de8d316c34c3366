"""
Network loading for JSON-defined road networks.

This module provides NetworkLoader for converting JSON network files into a
RoadNetwork. A network file is the fixed input graph of the visualizer:
- Cities with unique names and layout coordinates
- Undirected roads between named cities with a distance in km

Malformed input is fatal. The loader raises on the first problem (missing
fields, duplicate city, road to an unknown city, non-positive distance)
instead of skipping entries, since a half-built network would route wrongly
without any visible sign.

Network file structure:
```json
{
  "name": "Gujarat",
  "description": "...",
  "nodes": [{"name": "Ahmedabad", "x": 140, "y": 520}, ...],
  "edges": [{"a": "Ahmedabad", "b": "Gandhinagar", "weight": 25}, ...]
}
```

Usage:
    loader = NetworkLoader()
    network = loader.load("gujarat")
    # Pass to RouteController to start routing
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .config import Config
from .logging_utils import log_info
from .network import RoadNetwork, RoadNetworkState, build_network


class NetworkLoader:
    """Load and validate road networks from JSON files.

    Directory structure:
    - Default: ``Config.NETWORKS_DIR`` ({PROJECT_ROOT}/examples/networks/)
    - Override via constructor: NetworkLoader(Path("/custom/networks"))
    - Network files: {network_name}.json (e.g., "gujarat.json")
    """

    def __init__(self, networks_dir: Optional[Path] = None):
        """Initialize network loader.

        Args:
            networks_dir: Directory containing network files.
                          Defaults to Config.NETWORKS_DIR
        """
        self.networks_dir = networks_dir or Config.NETWORKS_DIR

    def load(self, network_name: str) -> RoadNetwork:
        """Load a network by name from JSON file.

        Args:
            network_name: Name of network (without .json extension)

        Returns:
            Fully built RoadNetwork, read-only from here on

        Raises:
            FileNotFoundError: If network file doesn't exist in networks_dir
            ValueError: If the JSON is malformed or breaks a graph invariant
                (DuplicateNodeError, UnknownNodeError and InvalidWeightError
                are raised as-is)
        """
        network_path = self.networks_dir / f"{network_name}.json"

        if not network_path.exists():
            raise FileNotFoundError(
                f"Network '{network_name}' not found at {network_path}"
            )

        try:
            data = json.loads(network_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Network '{network_name}' is not valid JSON: {exc}") from exc

        network = self.load_data(data)
        log_info(
            f"[Network] Loaded '{network_name}': {len(network)} cities, "
            f"{sum(1 for _ in network.edges())} roads"
        )
        return network

    def load_data(self, data: Dict[str, Any]) -> RoadNetwork:
        """Build a network from an already-parsed definition."""
        self._validate_network(data)
        try:
            state = RoadNetworkState.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Network definition failed validation:\n{exc}") from exc
        return build_network(state)

    def _validate_network(self, data: Any) -> None:
        """Validate network data has required fields.

        Raises:
            ValueError: If required fields are missing
        """
        if not isinstance(data, dict):
            raise ValueError("Network definition must be a JSON object")

        required = ["nodes", "edges"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Network missing required fields: {missing}")

        if not data["nodes"]:
            raise ValueError("Network must have at least one city")
