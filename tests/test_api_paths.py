from resourcehub.api_paths import build_api_path


def test_build_api_path_with_trailing_slash():
    assert build_api_path("https://api.example.com/", "users") == "https://api.example.com/api/v1/users"


def test_build_api_path_without_trailing_slash():
    assert build_api_path("https://api.example.com", "users") == "https://api.example.com/api/v1/users"


def test_build_api_path_strips_every_trailing_slash():
    assert build_api_path("https://api.example.com///", "users") == "https://api.example.com/api/v1/users"