from cvchat.config import settings
from cvchat.db import store


def test_default_profile_seeded_once(db):
    profile = store.get_profile(db)
    assert profile.id == settings.default_profile_id
    assert profile.name == "John Anderson"
    assert store.seed_default_profile(db).id == profile.id


def test_unknown_profile_is_absent(db):
    assert store.get_profile(db, "nope") is None
    assert store.update_profile(db, "nope", {"name": "X"}) is None


def test_create_profile_fills_defaults(db):
    profile = store.create_profile(db, {"name": "Ann Lee", "skills": ["Go"]})
    assert profile.id
    assert profile.id != settings.default_profile_id
    assert profile.title == "Software Professional"
    assert profile.skills == ["Go"]
    assert profile.experience == []
    assert profile.created_at is not None
    assert profile.updated_at is not None


def test_update_merges_fields_and_touches_timestamp(db):
    before = store.get_profile(db)
    skills = list(before.skills)
    stamp = before.updated_at

    updated = store.update_profile(
        db,
        settings.default_profile_id,
        {"name": "Jane Doe", "id": "hijack", "bogus": 1},
    )
    assert updated.id == settings.default_profile_id
    assert updated.name == "Jane Doe"
    assert updated.skills == skills
    assert updated.updated_at >= stamp


def test_update_replaces_lists(db):
    updated = store.update_profile(
        db,
        settings.default_profile_id,
        {"skills": [], "languages": [{"name": "Welsh", "level": "Basic", "context": "Basic proficiency"}]},
    )
    assert updated.skills == []
    assert updated.languages[0]["name"] == "Welsh"


def test_chat_history_per_profile_in_order(db):
    other = store.create_profile(db, {"name": "Other Person"})
    store.add_chat_message(db, settings.default_profile_id, "first?", "one")
    store.add_chat_message(db, other.id, "elsewhere?", "nope")
    store.add_chat_message(db, settings.default_profile_id, "second?", "two", section="skills")

    history = store.list_chat_messages(db, settings.default_profile_id)
    assert [m.message for m in history] == ["first?", "second?"]
    assert history[1].section == "skills"
    assert store.list_chat_messages(db, "missing") == []
