from datetime import datetime

import pytest

from mind_dump.models import Category, TagSet, TagSetError, TaskCandidate, TaskKind, confirm


def _candidate(**kw):
    data = {
        "id": "2026-10-14T09:30:00+08:00-0",
        "text": "买菜",
        "category": Category.LIFE.value,
        "anchor_timestamp": datetime(2026, 10, 14, 9, 30),
    }
    data.update(kw)
    return TaskCandidate(**data)


def test_candidate_defaults():
    c = _candidate()
    assert c.kind == TaskKind.ACTIONABLE
    assert c.category == "生活/购物"


def test_text_is_stripped():
    assert _candidate(text="  买菜 ").text == "买菜"


def test_idea_has_no_category():
    c = _candidate(kind=TaskKind.IDEA)
    assert c.category is None


def test_flip_kind():
    idea = _candidate().with_kind(TaskKind.IDEA)
    assert idea.kind == TaskKind.IDEA
    assert idea.category is None

    back = idea.with_kind(TaskKind.ACTIONABLE)
    assert back.kind == TaskKind.ACTIONABLE
    assert back.category == Category.WORK.value


def test_with_category_accepts_custom_label():
    c = _candidate(kind=TaskKind.IDEA).with_category("健身")
    assert c.kind == TaskKind.ACTIONABLE
    assert c.category == "健身"


def test_confirm_normalizes_batch():
    batch = [
        _candidate(id="a", category=None),
        _candidate(id="b", kind=TaskKind.IDEA),
        _candidate(id="c", category="健身"),
    ]
    out = confirm(batch)
    assert [c.id for c in out] == ["a", "b", "c"]
    assert out[0].category == Category.WORK.value
    assert out[1].category is None
    assert out[2].category == "健身"


def test_confirm_sets_completed_only_on_actionables():
    out = confirm([_candidate(id="a"), _candidate(id="b", kind=TaskKind.IDEA)])
    assert out[0].completed is False
    assert out[1].completed is None
    assert out[0].created_at == datetime(2026, 10, 14, 9, 30)
    assert out[0].date_key == "2026-10-14"


def test_confirm_checks_labels_against_tag_set():
    tags = TagSet()
    with pytest.raises(TagSetError):
        confirm([_candidate(category="不存在的标签")], tag_set=tags)

    tags.add("健身")
    out = confirm([_candidate(category="健身")], tag_set=tags)
    assert out[0].category == "健身"


def test_confirm_maps_renamed_builtin_category():
    tags = TagSet()
    tags.rename("life", "日常")
    out = confirm([_candidate(category=Category.LIFE.value)], tag_set=tags)
    # "生活/购物" is gone; the first label stands in for it
    assert out[0].category == "日常"


def test_toggle():
    task = confirm([_candidate()])[0]
    done = task.toggled()
    assert done.completed is True
    assert done.toggled().completed is False


def test_toggle_idea_rejected():
    idea = confirm([_candidate(kind=TaskKind.IDEA)])[0]
    with pytest.raises(ValueError):
        idea.toggled()
