from extraction.segmenter import segment
from extraction.task_extractor import TaskExtractor


def test_segment_keeps_spoken_order():
    assert segment("买菜，写周报，预约牙医") == ["买菜", "写周报", "预约牙医"]


def test_segment_all_delimiters():
    text = "a,b，c。d;e；f、g"
    assert segment(text) == ["a", "b", "c", "d", "e", "f", "g"]


def test_segment_trims_and_drops_empty():
    assert segment("  买菜 ，，  ；写周报。 ") == ["买菜", "写周报"]
    assert segment("。。。") == []
    assert segment("没有标点") == ["没有标点"]


def test_extractor_strips_dates():
    items = TaskExtractor().extract("明天买菜，下周三交周报")
    assert items == ["买菜", "交周报"]


def test_extractor_keeps_raw_item_when_only_date_words():
    items = TaskExtractor().extract("明天，买菜")
    assert items == ["明天", "买菜"]
