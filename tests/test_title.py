"""Tests for recipe name selection."""

from recipe_text.title import UNTITLED, extract_name


class TestExtractName:
    """Tests for picking a title from the first lines."""

    def test_no_lines(self):
        assert extract_name([]) == UNTITLED == "Untitled Recipe"

    def test_skips_headers_and_numbered_steps(self, garlic_chicken_lines):
        assert extract_name(garlic_chicken_lines) == "Garlic Butter Chicken"

    def test_longest_line_wins(self):
        lines = ["Quick", "A medium title", "The longest line here"]
        assert extract_name(lines) == "The longest line here"

    def test_first_of_equal_length_wins(self):
        assert extract_name(["Salad one", "Salad two"]) == "Salad one"

    def test_falls_back_to_first_line(self):
        assert extract_name(["Soup", "Stew"]) == "Soup"

    def test_header_lines_excluded(self):
        lines = ["Ingredients for the family dinner", "Pancakes"]
        assert extract_name(lines) == "Pancakes"

    def test_chinese_header_lines_excluded(self):
        assert extract_name(["红烧肉的做法大全", "妈妈的家常红烧肉"]) == "妈妈的家常红烧肉"

    def test_overlong_lines_excluded(self):
        assert extract_name(["a" * 100, "Pancakes"]) == "Pancakes"

    def test_only_first_ten_lines_considered(self):
        lines = ["Pancakes"] + ["xyz"] * 9 + ["A much longer line beyond the window"]
        assert extract_name(lines) == "Pancakes"

    def test_labelled_title_wins(self):
        lines = ["Some long introduction line", "Title: Mapo Tofu"]
        assert extract_name(lines) == "Mapo Tofu"

    def test_chinese_labelled_title(self):
        assert extract_name(["来自奶奶的家常菜谱", "菜名：红烧肉"]) == "红烧肉"

    def test_full_width_numbered_step_excluded(self):
        assert extract_name(["１．把鸡腿切成小块备用", "红烧肉"]) == "红烧肉"

    def test_ideographic_comma_step_excluded(self):
        assert extract_name(["2、加入酱油拌匀腌制十分钟", "红烧肉"]) == "红烧肉"
