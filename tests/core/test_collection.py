"""Collection — document lifecycle, size bookkeeping, and teardown.

Tests cover:
    - data slice shared with the store's data tree
    - get_or_create_doc idempotence (data argument ignored on hit)
    - add() bypasses the size counter
    - remove(): non-last prunes one key, last destroys the collection
    - destroy(): registry + tree key removed, tree identity kept
"""

from docstore.core.documents import LocalDoc
from docstore.core.store import Store


def test_collection_data_is_same_object_as_tree_entry(store):
    users = store.get_or_create_collection("users")
    assert users.data is store.data["users"]
    users.data["x"] = 1
    assert store.get("users.x") == 1


def test_new_collection_is_empty(store):
    users = store.get_or_create_collection("users")
    assert users.size == 0
    assert users.docs == {}
    assert not users.destroyed


# --- get_or_create_doc ---------------------------------------------------------

def test_get_or_create_doc_creates_local_doc_and_mirrors_data(store):
    users = store.get_or_create_collection("users")
    doc = users.get_or_create_doc("alice", {"name": "Alice"})
    assert isinstance(doc, LocalDoc)
    assert users.size == 1
    assert users.docs["alice"] is doc
    assert users.data["alice"] == {"name": "Alice"}


def test_get_or_create_doc_hit_ignores_new_data(store):
    users = store.get_or_create_collection("users")
    first = users.get_or_create_doc("alice", {"name": "Alice"})
    second = users.get_or_create_doc("alice", {"name": "Mallory"})
    assert second is first
    assert users.size == 1
    assert users.data["alice"] == {"name": "Alice"}
    assert first.get(["name"]) == "Alice"


def test_add_does_not_touch_size(store):
    users = store.get_or_create_collection("users")
    users.add("ghost", {"name": "Ghost"})
    assert "ghost" in users.docs
    assert users.size == 0


# --- remove ------------------------------------------------------------------

def test_remove_absent_id_is_noop(store):
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {"name": "Alice"})
    users.remove("nobody")
    assert users.size == 1
    assert store.get_collection("users") is users


def test_remove_one_of_two_keeps_collection_and_sibling(store):
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {"name": "Alice"})
    users.get_or_create_doc("bob", {"name": "Bob"})
    users.remove("alice")
    assert store.get_collection("users") is users
    assert users.size == 1
    assert "alice" not in users.docs
    assert store.get("users.alice") is None
    assert store.get("users.bob") == {"name": "Bob"}
    assert not users.destroyed


def test_remove_last_doc_destroys_collection(store):
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {"name": "Alice"})
    users.remove("alice")
    assert store.get_collection("users") is None
    assert store.get("users") is None
    assert users.destroyed


def test_remove_last_doc_leaves_stale_handle_untouched(store):
    """Whole-collection teardown: the stale handle still holds its old docs."""
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {"name": "Alice"})
    users.remove("alice")
    assert "alice" in users.docs
    assert users.data == {"alice": {"name": "Alice"}}
    assert users.size == 0


def test_recreated_collection_gets_fresh_state(store):
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {"name": "Alice"})
    users.remove("alice")
    again = store.get_or_create_collection("users")
    assert again is not users
    assert again.size == 0
    assert again.docs == {}
    assert store.get("users") == {}


# --- destroy -----------------------------------------------------------------

def test_destroy_removes_registry_and_tree_entry_only():
    store = Store()
    tree = store.data
    store.get_or_create_doc("users", "alice", {"name": "Alice"})
    store.get_or_create_doc("posts", "p1", {"title": "Hi"})
    store.get_collection("users").destroy()
    assert store.data is tree
    assert "users" not in tree
    assert store.get_collection("users") is None
    assert store.get("posts.p1") == {"title": "Hi"}


def test_destroy_does_not_adjust_size():
    store = Store()
    users = store.get_or_create_collection("users")
    users.get_or_create_doc("alice", {})
    users.destroy()
    assert users.size == 1
