from logic.style_analyzer import analyze_style
from models.taxonomy import Category, Fit
from models.wardrobe_item import WardrobeItem


def _item(item_id: str, category: str, analysis: str) -> WardrobeItem:
    return WardrobeItem(item_id=item_id, category=category, ai_analysis=analysis)


def test_categories_keep_first_seen_order():
    analysis = analyze_style(
        [
            _item("1", "Shoes", "black boots"),
            _item("2", "Top", "tee"),
            _item("3", "Shoes", "sneakers"),
        ]
    )
    assert analysis.categories == [Category.SHOES, Category.TOP]


def test_default_preference_is_casual():
    analysis = analyze_style([_item("1", "Top", "plain cotton top")])
    assert analysis.style_preferences == ["casual"]
    assert analysis.predominant_fit is Fit.MIXED


def test_preferences_follow_vocabulary():
    analysis = analyze_style(
        [
            _item("1", "Outerwear", "Wool blazer"),
            _item("2", "Top", "Relaxed linen shirt"),
            _item("3", "Shoes", "Sport trainers"),
        ]
    )
    assert analysis.style_preferences == ["professional", "casual", "athleisure"]
    assert analysis.has_suits is True


def test_dress_detection_uses_category_or_text():
    by_category = analyze_style([_item("1", "Dress", "floral midi")])
    by_text = analyze_style([_item("1", "Top", "shirt dress, belted")])
    assert by_category.has_dresses and by_text.has_dresses
    assert not analyze_style([_item("1", "Top", "shirt")]).has_dresses


def test_skirts_are_detected_from_text_only():
    assert analyze_style([_item("1", "Bottom", "Pleated midi skirt")]).has_skirts
    assert not analyze_style([_item("1", "Bottom", "Wide trousers")]).has_skirts


def test_fit_needs_a_clear_majority():
    tailored = analyze_style([_item("1", "Top", "tailored"), _item("2", "Bottom", "fitted")])
    assert tailored.predominant_fit is Fit.TAILORED

    relaxed = analyze_style([_item("1", "Top", "oversized knit"), _item("2", "Bottom", "loose")])
    assert relaxed.predominant_fit is Fit.RELAXED

    # 3 tailored vs 2 relaxed is not above the 1.5 ratio
    close = analyze_style(
        [
            _item("1", "Top", "tailored fitted structured"),
            _item("2", "Bottom", "relaxed loose"),
        ]
    )
    assert close.predominant_fit is Fit.MIXED
