"""
Rules loading and validation tests.

Verifies that rules.yaml parses into Rules and that bad program ids,
seeds and YAML are rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.rules.loader import load_rules
from src.rules.models import RentRules, Rules, StorageRules

PROGRAM_ID = "BYBFmxjHn48LVAjKfo7dX6kPTw62HNPTktMqnpNeeiHu"


@pytest.fixture
def valid_rules_path(project_root: Path) -> Path:
    """Path to the actual rules.yaml file."""
    return project_root / "rules.yaml"


def create_temp_rules(tmp_path: Path, rules: dict[str, Any]) -> Path:
    """Write rules to a temporary YAML file."""
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules))
    return path


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, valid_rules_path: Path) -> None:
        """Shipped rules file loads successfully."""
        rules = load_rules(valid_rules_path)

        assert rules.program.program_id == PROGRAM_ID
        assert rules.program.seed == "solana_business_card"
        assert rules.storage.backend == "sqlite"

    def test_program_bytes(self, valid_rules_path: Path) -> None:
        rules = load_rules(valid_rules_path)

        assert len(rules.program.program_id_bytes) == 32
        assert rules.program.seed_bytes == b"solana_business_card"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("program: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_fenced_yaml(self, tmp_path: Path) -> None:
        """Rules may be embedded in a markdown yaml block."""
        path = tmp_path / "rules.md"
        path.write_text(f"# Rules\n\n```yaml\nprogram:\n  program_id: {PROGRAM_ID}\n```\n")

        assert load_rules(path).program.program_id == PROGRAM_ID

    def test_defaults_applied(self, tmp_path: Path) -> None:
        path = create_temp_rules(tmp_path, {"program": {"program_id": PROGRAM_ID}})

        rules = load_rules(path)

        assert rules.rent == RentRules()
        assert rules.storage == StorageRules()
        assert rules.storage.backend == "memory"
        assert rules.logging.level == "INFO"


class TestRulesValidation:
    """Schema constraints."""

    def test_program_section_required(self, tmp_path: Path) -> None:
        path = create_temp_rules(tmp_path, {"rent": {}})

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_bad_program_id(self, tmp_path: Path) -> None:
        path = create_temp_rules(tmp_path, {"program": {"program_id": "0OIl-not-base58"}})

        with pytest.raises(ValueError):
            load_rules(path)

    def test_short_program_id(self, tmp_path: Path) -> None:
        path = create_temp_rules(tmp_path, {"program": {"program_id": "abc"}})

        with pytest.raises(ValueError):
            load_rules(path)

    def test_seed_too_long(self, tmp_path: Path) -> None:
        path = create_temp_rules(
            tmp_path, {"program": {"program_id": PROGRAM_ID, "seed": "s" * 33}}
        )

        with pytest.raises(ValueError):
            load_rules(path)

    def test_empty_seed(self, tmp_path: Path) -> None:
        path = create_temp_rules(tmp_path, {"program": {"program_id": PROGRAM_ID, "seed": ""}})

        with pytest.raises(ValueError):
            load_rules(path)

    def test_unknown_backend(self, tmp_path: Path) -> None:
        path = create_temp_rules(
            tmp_path,
            {"program": {"program_id": PROGRAM_ID}, "storage": {"backend": "redis"}},
        )

        with pytest.raises(ValueError):
            load_rules(path)

    def test_negative_rent_rejected(self) -> None:
        with pytest.raises(ValueError):
            RentRules(lamports_per_byte_year=-1)


class TestRent:
    def test_favorites_account(self) -> None:
        assert RentRules().minimum_balance(344) == 3_285_120

    def test_empty_account(self) -> None:
        assert RentRules().minimum_balance(0) == 890_880

    def test_model_validate(self) -> None:
        rules = Rules.model_validate(
            {"program": {"program_id": PROGRAM_ID}, "rent": {"exemption_threshold": 1.0}}
        )

        assert rules.rent.minimum_balance(0) == 445_440
