# tests\core\test_feature_type.py
import pytest

from lexis.core.domain.exceptions import ConsistencyError, ImportedValueNotFoundError, ValidationError
from lexis.core.domain.feature import Feature, FeatureKind
from lexis.core.domain.feature_registry import FeatureRegistry
from lexis.core.domain.feature_type import FeatureList, FeatureType
from lexis.core.domain.importer import FeatureImporter

@pytest.fixture
def genders():
    return FeatureType(FeatureKind.GENDER, ["masculine", "feminine", "neuter"], "lat")

class TestFeatureTypeConstruction:
    def test_order_follows_values(self, genders):
        assert genders.ordered_values == ["masculine", "feminine", "neuter"]
        assert genders.order_lookup == {"masculine": 0, "feminine": 1, "neuter": 2}

    def test_co_equal_values_share_a_rank(self):
        ft = FeatureType(FeatureKind.GENDER, [["masculine", "feminine"], "neuter"], "lat")
        assert ft.ordered_values == [["masculine", "feminine"], "neuter"]
        assert ft.order_lookup == {"masculine": 0, "feminine": 0, "neuter": 1}
        assert "feminine" in ft

    def test_empty_values_are_allowed(self):
        """Open-ended categories such as footnotes have no fixed values."""
        ft = FeatureType(FeatureKind.FOOTNOTE, [], "lat")
        assert ft.ordered_values == []
        assert ft.get("1").value == "1"

    def test_empty_co_equal_group_is_rejected(self):
        with pytest.raises(ValidationError, match="co-equal"):
            FeatureType(FeatureKind.GENDER, [[], "neuter"], "lat")

    def test_values_must_be_a_list(self):
        with pytest.raises(ValidationError, match="list"):
            FeatureType(FeatureKind.GENDER, "masculine", "lat")
        with pytest.raises(ValidationError):
            FeatureType(FeatureKind.GENDER, None, "lat")

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError, match="not supported"):
            FeatureType("colour", ["red"], "lat")

    def test_language_is_required(self):
        with pytest.raises(ValidationError, match="language"):
            FeatureType(FeatureKind.GENDER, ["masculine"], "")


class TestFeatureGeneration:
    def test_get_returns_feature_of_this_type(self, genders):
        feature = genders.get("masculine")
        assert feature == Feature("masculine", FeatureKind.GENDER, "lat")

    def test_get_accepts_unregistered_values(self, genders):
        assert genders.get("common").value == "common"

    def test_get_rejects_empty_value(self, genders):
        with pytest.raises(ValidationError, match="non-empty value"):
            genders.get("")

    def test_getitem_returns_registered_feature(self, genders):
        assert genders["neuter"] == Feature("neuter", FeatureKind.GENDER, "lat")
        with pytest.raises(KeyError):
            genders["common"]

    def test_ordered_features_turn_groups_into_multi_valued_features(self):
        ft = FeatureType(FeatureKind.GENDER, [["masculine", "feminine"], "neuter"], "lat")
        first, second = ft.ordered_features
        assert first.values == ("masculine", "feminine")
        assert second == Feature("neuter", FeatureKind.GENDER, "lat")


class TestFeatureTypeOrder:
    def test_reorder_changes_ordered_values(self, genders):
        genders.order = [genders["neuter"], genders["masculine"], genders["feminine"]]
        assert genders.ordered_values == ["neuter", "masculine", "feminine"]
        assert genders.order_lookup["neuter"] == 0

    def test_reorder_with_co_equal_group(self, genders):
        genders.set_order([[genders["masculine"], genders["feminine"]], genders["neuter"]])
        assert genders.ordered_values == [["masculine", "feminine"], "neuter"]
        assert genders.order_lookup == {"masculine": 0, "feminine": 0, "neuter": 1}

    def test_single_feature_is_accepted(self, genders):
        genders.order = genders["neuter"]
        assert genders.ordered_values == ["neuter"]

    def test_empty_order_is_rejected(self, genders):
        with pytest.raises(ValidationError, match="non-empty"):
            genders.order = []

    def test_unregistered_value_is_rejected(self, genders):
        with pytest.raises(ConsistencyError, match="not stored"):
            genders.order = [genders.get("common"), genders["neuter"]]
        # The previous order is untouched.
        assert genders.ordered_values == ["masculine", "feminine", "neuter"]

    def test_unregistered_value_inside_group_is_rejected(self, genders):
        with pytest.raises(ConsistencyError):
            genders.order = [[genders["masculine"], genders.get("common")]]

    def test_foreign_type_is_rejected(self, genders):
        with pytest.raises(ConsistencyError, match="type"):
            genders.order = [Feature("masculine", FeatureKind.DECLENSION, "lat")]

    def test_foreign_language_is_rejected(self, genders):
        with pytest.raises(ConsistencyError, match="language"):
            genders.order = [Feature("masculine", FeatureKind.GENDER, "grc")]


class TestImporters:
    def test_add_importer_returns_same_instance(self, genders):
        importer = genders.add_importer("whitakers")
        assert isinstance(importer, FeatureImporter)
        assert genders.add_importer("whitakers") is importer
        assert genders.importer("whitakers") is importer

    def test_add_importer_requires_name(self, genders):
        with pytest.raises(ValidationError):
            genders.add_importer("")

    def test_mapping(self):
        importer = FeatureImporter().map("m", "masculine").map("f", "feminine")
        assert importer.has("m")
        assert importer.get("f") == "feminine"
        importer.map("m", ["masculine", "feminine"])
        assert importer.get("m") == ["masculine", "feminine"]

    def test_missing_value_raises_lookup_error(self):
        importer = FeatureImporter()
        with pytest.raises(LookupError):
            importer.get("x")
        with pytest.raises(ImportedValueNotFoundError, match="'x'"):
            importer.get("x")

    def test_empty_values_are_rejected(self):
        with pytest.raises(ValidationError):
            FeatureImporter().map("", "masculine")
        with pytest.raises(ValidationError):
            FeatureImporter().map("m", "")


class TestFeatureListAndRegistry:
    def test_feature_list_lookup(self, genders):
        numbers = FeatureType(FeatureKind.NUMBER, ["singular", "plural"], "lat")
        fl = FeatureList([genders, numbers])
        assert fl.items == [genders, numbers]
        assert fl.has_type(FeatureKind.NUMBER)
        assert fl.of_type("gender") is genders
        assert fl.of_type(FeatureKind.CASE) is None

    def test_feature_list_requires_list(self):
        with pytest.raises(ValidationError):
            FeatureList().add("gender")

    def test_registries_are_independent(self, genders):
        first = FeatureRegistry([genders])
        second = FeatureRegistry()
        assert first.get("lat", FeatureKind.GENDER) is genders
        assert second.find("lat", FeatureKind.GENDER) is None
        with pytest.raises(ConsistencyError, match="gender"):
            second.get("lat", FeatureKind.GENDER)

    def test_registry_per_language(self, genders):
        greek = FeatureType(FeatureKind.GENDER, ["masculine", "feminine", "neuter"], "grc")
        registry = FeatureRegistry([genders, greek])
        assert registry.languages() == ["lat", "grc"]
        assert registry.get("grc", "gender") is greek
        assert registry.for_language("lat").items == [genders]
