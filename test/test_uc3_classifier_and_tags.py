import pytest

from classification.task_classifier import TaskClassifier, classify
from mind_dump.models import Category, MAX_TAGS, TagSet, TagSetError


@pytest.mark.parametrize(
    "text,expected",
    [
        ("看看拉面店选址", Category.VENTURE),
        ("算一下这个月的成本", Category.VENTURE),
        ("学习React hooks", Category.TECH),
        ("复习 TypeScript 泛型", Category.TECH),
        ("写周报", Category.WORK),
        ("修一下登录的bug", Category.WORK),
        ("对齐Q4的OKR", Category.WORK),
        ("整理会议纪要", Category.WORK),
        ("去超市买菜", Category.LIFE),
        ("预约牙医", Category.LIFE),
    ],
)
def test_classify(text, expected):
    assert classify(text) == expected


def test_venture_wins_over_life():
    assert classify("为拉面店选址顺便买点东西") == Category.VENTURE


def test_tech_wins_over_work():
    assert classify("项目里的css问题") == Category.TECH


def test_default_category():
    assert classify("想一想") == Category.WORK
    assert classify("") == Category.WORK


def test_classifier_keeps_order():
    out = TaskClassifier().classify(["买菜", "写周报", "学习vite"])
    assert out == [Category.LIFE, Category.WORK, Category.TECH]


def test_classifier_custom_rules():
    classifier = TaskClassifier(rules=[(Category.LIFE, ("跑步",))])
    assert classifier.classify_one("晚上跑步") == Category.LIFE
    assert classifier.classify_one("拉面") == Category.WORK


def test_default_tags():
    tags = TagSet()
    assert tags.labels() == ["生活/购物", "本业工作", "拉面店创业", "Web开发学习"]
    assert all(t.builtin for t in tags.tags)
    assert tags.get("ramen").label == "拉面店创业"


def test_add_tag():
    tags = TagSet()
    tag = tags.add("  健身 ")
    assert tag.label == "健身"
    assert tag.id.startswith("custom-")
    assert not tag.builtin
    assert tags.add("健身") == tag
    assert len(tags.tags) == 5


def test_tag_capacity():
    tags = TagSet()
    for i in range(MAX_TAGS - len(tags.tags)):
        tags.add(f"标签{i}")
    assert len(tags.tags) == MAX_TAGS
    with pytest.raises(TagSetError):
        tags.add("再来一个")


def test_remove_never_empties():
    tags = TagSet()
    for tag_id in ["life", "work", "ramen"]:
        tags.remove(tag_id)
    assert tags.labels() == ["Web开发学习"]
    with pytest.raises(TagSetError):
        tags.remove("webdev")


def test_rename_and_resolve():
    tags = TagSet()
    assert tags.resolve(Category.VENTURE).id == "ramen"
    tags.rename("ramen", "副业")
    assert tags.get("ramen").label == "副业"
    assert tags.get("ramen").builtin
    # no label carries the canonical name anymore -> first label
    assert tags.resolve(Category.VENTURE).id == "life"


def test_rename_to_existing_label_rejected():
    tags = TagSet()
    with pytest.raises(TagSetError):
        tags.rename("ramen", "本业工作")


def test_unknown_tag():
    with pytest.raises(TagSetError):
        TagSet().get("nope")


def test_only_tech_keywords_ignore_case():
    assert classify("学习VITE配置") == Category.TECH
    # "BUG" is not the work keyword "bug"; the life keyword decides
    assert classify("BUG买东西") == Category.LIFE
    assert classify("bug买东西") == Category.WORK
