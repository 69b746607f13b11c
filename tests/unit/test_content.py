# =============================================================================
# tests/unit/test_content.py
# Unit Tests for bundled content loading
# =============================================================================

import pytest
import pandas as pd

from agriscan_core.data import (
    Disease,
    diseases_to_frame,
    find_disease,
    load_diseases,
    load_translations,
    load_vendors,
    severity_counts,
)
from agriscan_core.errors import DataLoadError


class TestLoaders:

    def test_load_diseases(self, data_dir):
        diseases = load_diseases(data_dir)
        assert [d.id for d in diseases] == ["d1", "d2", "d3"]
        assert diseases[0].common_areas == ["Central Luzon"]

    def test_load_vendors(self, data_dir):
        vendors = load_vendors(data_dir)
        assert len(vendors) == 3
        assert vendors[0].verified is True

    def test_translation_keys_lowercased(self, data_dir):
        dictionary = load_translations(data_dir)
        assert dictionary["rice"] == "bigas"
        assert "RICE" not in dictionary

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DataLoadError) as exc:
            load_diseases(tmp_path)
        assert exc.value.message == "Failed to load disease data"
        assert exc.value.code == "DATA_001"

    def test_invalid_json_raises(self, tmp_path):
        (tmp_path / "vendors.json").write_text("[{", encoding="utf-8")
        with pytest.raises(DataLoadError, match="Failed to load vendor data"):
            load_vendors(tmp_path)

    def test_bad_severity_raises(self, tmp_path):
        (tmp_path / "diseases.json").write_text(
            '[{"id": "x", "name": "X", "severity": "Extreme"}]', encoding="utf-8")
        with pytest.raises(DataLoadError):
            load_diseases(tmp_path)

    def test_translations_must_be_object(self, tmp_path):
        (tmp_path / "translations.json").write_text("[]", encoding="utf-8")
        with pytest.raises(DataLoadError, match="Failed to load translation dictionary"):
            load_translations(tmp_path)

    def test_bundled_content_is_consistent(self):
        """Shipped JSON loads and covers the scanner's disease ids"""
        diseases = load_diseases()
        assert {"d1", "d2", "d3", "d4", "d5"} <= {d.id for d in diseases}
        assert len(load_vendors()) >= 8
        assert len(load_translations()) >= 100


class TestFindDisease:

    def test_found(self, sample_diseases):
        assert find_disease(sample_diseases, "d2").name == "Bacterial Leaf Blight"

    def test_missing_id(self, sample_diseases):
        with pytest.raises(DataLoadError, match="No disease ID provided"):
            find_disease(sample_diseases, None)

    def test_unknown_id(self, sample_diseases):
        with pytest.raises(DataLoadError, match="Disease not found"):
            find_disease(sample_diseases, "d42")


class TestDiseaseFrames:

    def test_frame_shape(self, sample_diseases):
        df = diseases_to_frame(sample_diseases)
        assert list(df["id"]) == ["d1", "d2", "d3"]
        assert df.loc[0, "symptoms"] == 2
        assert df["severity"].cat.ordered

    def test_severity_counts_include_all_levels(self, sample_diseases):
        counts = severity_counts(sample_diseases[:1])
        assert list(counts.index) == ["Low", "Medium", "High"]
        assert counts.to_dict() == {"Low": 0, "Medium": 0, "High": 1}

    def test_empty_list(self):
        assert severity_counts([]).sum() == 0


class TestDiseaseModel:

    def test_invalid_severity_rejected(self):
        with pytest.raises(ValueError):
            Disease(id="x", name="X", description="", severity="Severe")

    def test_dict_uses_camel_case_areas(self, sample_diseases):
        raw = sample_diseases[0].to_dict()
        assert raw["commonAreas"] == ["Central Luzon"]
        assert Disease.from_dict(raw) == sample_diseases[0]
