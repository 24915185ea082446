import random

import pytest

from yanyuan_flowers.campus import CampusMap
from yanyuan_flowers.flowers import FlowerInfo, default_flowers
from yanyuan_flowers.quiz import FlowerQuiz, QuizError, QuizResult, candidates_at


def _small_flowers():
    return [
        FlowerInfo(id=1, name="a", florescence=(3,), locations=("x",)),
        FlowerInfo(id=2, name="b", florescence=(4,), locations=("x",)),
        FlowerInfo(id=3, name="c", florescence=(5,), locations=("y",)),
    ]


def test_empty_quiz_raises():
    quiz = FlowerQuiz([], random.Random(1))
    with pytest.raises(QuizError):
        quiz.next_flower()


def test_round_shows_every_flower_once():
    flowers = default_flowers()
    quiz = FlowerQuiz(flowers, random.Random(7))
    ids = [quiz.next_flower().id for _ in flowers]
    assert sorted(ids) == sorted(f.id for f in flowers)


def test_round_resets_after_all_shown():
    quiz = FlowerQuiz(_small_flowers(), random.Random(3))
    for _ in range(3):
        quiz.next_flower()
    fourth = quiz.next_flower()
    assert quiz.shown_ids == [fourth.id]


def test_next_flower_sets_current():
    quiz = FlowerQuiz(_small_flowers(), random.Random(5))
    flower = quiz.next_flower()
    assert quiz.current == flower


def test_answer_without_question_raises():
    quiz = FlowerQuiz(_small_flowers(), random.Random(2))
    with pytest.raises(QuizError):
        quiz.answer(1)


def test_correct_answer():
    quiz = FlowerQuiz(_small_flowers(), random.Random(4))
    asked = quiz.next_flower()
    result = quiz.answer(asked.id)
    assert result.correct is True
    assert result.selected_name == asked.name
    assert result.correct_name == asked.name
    assert result.message == f"✓ 回答正确！\n\n你找到了: {asked.name}"


def test_wrong_answer_reports_both_names():
    flowers = _small_flowers()
    quiz = FlowerQuiz(flowers, random.Random(9))
    asked = quiz.next_flower()
    wrong = next(f for f in flowers if f.id != asked.id)
    result = quiz.answer(wrong.id)
    assert result.correct is False
    assert result.correct_id == asked.id
    assert result.selected_name == wrong.name
    assert result.message == (
        f"✗ 回答错误\n\n你选择了: {wrong.name}\n正确答案: {asked.name}"
    )


def test_answer_advances_to_new_question():
    quiz = FlowerQuiz(_small_flowers(), random.Random(11))
    asked = quiz.next_flower()
    quiz.answer(asked.id)
    assert len(quiz.shown_ids) == 2
    assert quiz.current.id != asked.id


def test_unknown_selected_id_gives_empty_name():
    quiz = FlowerQuiz(_small_flowers(), random.Random(1))
    quiz.next_flower()
    result = quiz.answer(999)
    assert result.selected_name == ""
    assert result.correct is False


def test_quiz_result_is_plain_value():
    result = QuizResult(True, 1, 1, "a", "a")
    assert result == QuizResult(True, 1, 1, "a", "a")


def _linked_campus():
    campus = CampusMap()
    campus.link_flowers(default_flowers())
    return campus


def test_candidates_at_place_with_flowers():
    campus = _linked_campus()
    lake = next(loc for loc in campus.locations if loc.name == "未名湖")
    found = candidates_at(campus, lake.display_pos)
    assert found == campus.flowers_at("未名湖")
    assert all("未名湖" in f.locations for f in found)


def test_candidates_at_place_without_flowers():
    campus = _linked_campus()
    gate = next(loc for loc in campus.locations if loc.name == "西侧门")
    assert candidates_at(campus, gate.display_pos) == []


def test_candidates_on_empty_map():
    assert candidates_at(CampusMap([]), (0.0, 0.0)) == []