"""
Tests for Rails inflection helpers (singularization, PascalCase and
table-to-model conversion).
"""
import pytest
from parsing.inflection import singularize, table_to_model, to_pascal_case


class TestSingularize:
    """Test singularize() function with Rails inflection rules."""

    def test_regular_plurals(self):
        """Test basic -s plurals."""
        assert singularize("users") == "user"
        assert singularize("posts") == "post"
        assert singularize("comments") == "comment"

    def test_irregular_plurals(self):
        """Test irregular plural forms."""
        assert singularize("people") == "person"
        assert singularize("men") == "man"
        assert singularize("children") == "child"
        assert singularize("sexes") == "sex"
        assert singularize("moves") == "move"
        assert singularize("zombies") == "zombie"

    def test_irregular_last_segment(self):
        """Irregular words are recognised at the end of compound names."""
        assert singularize("company_people") == "company_person"
        assert singularize("school_children") == "school_child"

    def test_consonant_y_plurals(self):
        """Test consonant + y -> ies pattern."""
        assert singularize("categories") == "category"
        assert singularize("companies") == "company"
        assert singularize("queries") == "query"

    def test_special_endings(self):
        """Test special endings (x, ch, ss, sh, o)."""
        assert singularize("boxes") == "box"
        assert singularize("churches") == "church"
        assert singularize("classes") == "class"
        assert singularize("dishes") == "dish"
        assert singularize("addresses") == "address"
        assert singularize("heroes") == "hero"

    def test_f_fe_plurals(self):
        """Test f/fe -> ves plurals."""
        assert singularize("knives") == "knife"
        assert singularize("wolves") == "wolf"
        assert singularize("shelves") == "shelf"

    def test_latin_and_greek_plurals(self):
        """Test -i, -ses, -ices, -a plurals."""
        assert singularize("octopi") == "octopus"
        assert singularize("analyses") == "analysis"
        assert singularize("analysis") == "analysis"
        assert singularize("bases") == "basis"
        assert singularize("crises") == "crisis"
        assert singularize("matrices") == "matrix"
        assert singularize("vertices") == "vertex"
        assert singularize("indices") == "index"
        assert singularize("criteria") == "criterium"
        assert singularize("phenomena") == "phenomenon"

    def test_special_cases(self):
        """Test special edge cases."""
        assert singularize("oxen") == "ox"
        assert singularize("quizzes") == "quiz"
        assert singularize("buses") == "bus"
        assert singularize("statuses") == "status"
        assert singularize("mice") == "mouse"
        assert singularize("databases") == "database"

    def test_uncountables(self):
        """Test uncountable words (no change)."""
        for word in ["equipment", "information", "series", "species", "sheep", "data", "metadata"]:
            assert singularize(word) == word

    def test_already_singular(self):
        """Test words that are already singular."""
        assert singularize("user") == "user"
        assert singularize("news") == "news"

    def test_empty_string(self):
        """Test empty string handling."""
        assert singularize("") == ""


class TestToPascalCase:
    """Test to_pascal_case()."""

    def test_snake_case(self):
        assert to_pascal_case("user_profile") == "UserProfile"
        assert to_pascal_case("company_status") == "CompanyStatus"

    def test_whitespace_and_empty_segments(self):
        assert to_pascal_case("blog  post") == "BlogPost"
        assert to_pascal_case("__series_a__") == "SeriesA"
        assert to_pascal_case("") == ""

    def test_keeps_inner_capitals(self):
        """Only the first letter of a segment changes."""
        assert to_pascal_case("api_URL") == "ApiURL"


class TestTableToModel:
    """Test table_to_model() function."""

    @pytest.mark.parametrize("table, model", [
        ("users", "User"),
        ("people", "Person"),
        ("company_branches", "CompanyBranch"),
        ("addresses", "Address"),
        ("analyses", "Analysis"),
        ("indices", "Index"),
        ("buses", "Bus"),
        ("boxes", "Box"),
        ("dishes", "Dish"),
        ("categories", "Category"),
        ("api_keys", "ApiKey"),
        ("user_profiles", "UserProfile"),
    ])
    def test_documented_names(self, table, model):
        assert table_to_model(table) == model

    def test_schema_prefix(self):
        """Test table names with schema prefix."""
        assert table_to_model("public.users") == "User"
        assert table_to_model("dbo.people") == "Person"

    def test_uncountables(self):
        """Test uncountable table names."""
        assert table_to_model("equipment") == "Equipment"
        assert table_to_model("ar_internal_metadata") == "ArInternalMetadata"

    def test_case_insensitive(self):
        """Test that input case doesn't matter."""
        assert table_to_model("USERS") == "User"
        assert table_to_model("user_PROFILES") == "UserProfile"

    def test_empty_string(self):
        assert table_to_model("") == ""
