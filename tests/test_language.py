from weather_server.language import resolve_language


def test_spanish_maps_to_sp():
    assert resolve_language("es-ES") == "sp"
    assert resolve_language("es-MX") == "sp"


def test_chinese_variants():
    assert resolve_language("zh-CN") == "zh_cn"
    assert resolve_language("zh-TW") == "zh_tw"
    assert resolve_language("zh-HK") == "en"


def test_prefix_entries():
    assert resolve_language("de-AT") == "de"
    assert resolve_language("uk-UA") == "ua"


def test_underscore_locale():
    assert resolve_language("de_DE") == "de"


def test_unmatched_defaults_to_english():
    assert resolve_language("xx-YY") == "en"
    assert resolve_language("") == "en"
    assert resolve_language(None) == "en"


def test_script_tagged_locale():
    assert resolve_language("zh-Hans-CN") == "zh_cn"
    assert resolve_language("zh_Hant_TW") == "zh_tw"
    assert resolve_language("sr-Latn-RS") == "en"


def test_language_only_locale():
    assert resolve_language("de") == "de"
    assert resolve_language("zh") == "en"
