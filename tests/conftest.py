"""
Test configuration and fixtures for rails_tsp tests.
"""
import os
import tempfile
import pytest
from pathlib import Path
from unittest.mock import Mock

# Add parent directory to Python path for imports
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_SCHEMA = '''
ActiveRecord::Schema[7.1].define(version: 2024_05_01_000000) do
  enable_extension "plpgsql"

  create_table "users", force: :cascade, comment: "Registered users" do |t|
    t.string "name", null: false
    t.integer "role", default: 0, null: false
    t.timestamps null: false
    t.index ["name"], name: "index_users_on_name"
  end

  create_table "companies", force: :cascade do |t|
    t.string "name", limit: 100, null: false
    t.integer "company_status", default: 0
    t.decimal "capital", precision: 12, scale: 2
  end

  create_table "prefectures", force: :cascade do |t|
    t.string "name"
  end

  add_foreign_key "users", "companies"
end
'''

USER_MODEL = '''
class User < ApplicationRecord
  enum :role, { member: 0, admin: 1 }
end
'''

COMPANY_MODEL = '''
class Company < ApplicationRecord
  enum :company_status, [ :disabled, :enabled ]
end
'''

ORPHAN_MODEL = '''
class Invoice < ApplicationRecord
  enum :state, %i(draft sent)
end
'''


@pytest.fixture
def temp_project_root():
    """Create a temporary Rails project with schema.rb and model files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_root = Path(temp_dir)

        (project_root / "db").mkdir()
        (project_root / "app" / "models" / "concerns").mkdir(parents=True)

        (project_root / "db" / "schema.rb").write_text(SAMPLE_SCHEMA)
        models_dir = project_root / "app" / "models"
        (models_dir / "user.rb").write_text(USER_MODEL)
        (models_dir / "company.rb").write_text(COMPANY_MODEL)
        (models_dir / "invoice.rb").write_text(ORPHAN_MODEL)
        (models_dir / "application_record.rb").write_text(
            "class ApplicationRecord < ActiveRecord::Base\n  primary_abstract_class\nend\n"
        )
        (models_dir / "concerns" / "user.rb").write_text(
            "module User\n  enum :ghost, [:boo]\nend\n"
        )

        yield str(project_root)


@pytest.fixture
def mock_reporter():
    """Reporter double recording info/warn calls."""
    return Mock()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep RAILS_TSP_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("RAILS_TSP_"):
            monkeypatch.delenv(key, raising=False)
