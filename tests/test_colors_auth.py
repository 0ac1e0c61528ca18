from common.colors import TEAM_PALETTES, is_light, pick_match_colors, similar, team_palette
from controllers.auth_controller import check_password, cookie_token


def test_catalog_teams_keep_primary_colours():
    pal = pick_match_colors("Vikings", "Dragons")
    assert pal.color_a == TEAM_PALETTES["Vikings"]["primary"]
    assert pal.color_b == TEAM_PALETTES["Dragons"]["primary"]
    assert pal.as_map("Vikings", "Dragons") == {"Vikings": pal.color_a, "Dragons": pal.color_b}


def test_catalog_pairs_never_clash():
    teams = list(TEAM_PALETTES)
    for a in teams:
        for b in teams:
            if a != b:
                pal = pick_match_colors(a, b)
                assert not similar(pal.color_a, pal.color_b), (a, b)


def test_unknown_team_gets_stable_palette():
    assert team_palette("Sharks") == team_palette("Sharks")
    assert team_palette("Sharks")["primary"].startswith("#")


def test_is_light():
    assert is_light("#FFFFFF")
    assert not is_light("#111827")


def test_check_password():
    assert check_password("admin", "admin")
    assert not check_password("Admin", "admin")
    assert not check_password("", "admin")
    assert not check_password(None, "admin")


def test_cookie_token_follows_password():
    assert cookie_token("admin") == cookie_token("admin")
    assert cookie_token("admin") != cookie_token("secret")


def test_logo_path(tmp_path):
    from common.logos import logo_path
    (tmp_path / "vikings.png").write_bytes(b"png")
    assert logo_path("Vikings", tmp_path) == str(tmp_path / "vikings.png")
    assert logo_path("Dragons", tmp_path) == ""
    assert logo_path("", tmp_path) == ""
