"""Integration tests for the public releaser operations on the packaged data."""

from __future__ import annotations

import pytest

import releaser


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("the blah", "The Blah"),
        ("in the blah", "In the Blah"),
        ("TheBlah", "Theblah"),
        ("MiRROR now", "Mirror Now"),
        ("In the row now ii", "In the Row Now II"),
        ("MiRROR now bbS", "Mirror Now BBS"),
        ("this-is-a-slug-string", "This-is-a-Slug-String"),
        ("Group inc.,RAZOR TO 1911", "Group Inc, Razor to 1911"),
        ("this is the group,the group is this", "This is the Group, The Group is This"),
        ("4TH dimension", "4th Dimension"),
        ("4TH dimension, 5Th Dynasty", "4th Dimension, 5th Dynasty"),
        ("2000 ad", "2000AD"),
        ("2000ad, 500bc", "2000AD, 500BC"),
        (
            "Lightforce,Pact,TRSi,Venom,Razor 1911,the System",
            "Lightforce, Pact, TRSi, Venom, Razor 1911, The System",
        ),
        ("  Defacto2  demo  group.", "Defacto2 Demo Group"),
        ("the  Defacto2  demo  group", "The Defacto2 Demo Group"),
        ("  the x bbs  ", "X BBS"),
        ("The X Ftp", "X FTP"),
        ("tdt / trsi", "Tdt Trsi"),
        ("tdt,trsi", "Tdt, TRSi"),
        ("the 12am group.", "The 12AM Group"),
    ],
)
def test_clean_formats_display_names(text: str, expected: str) -> None:
    """Cleaning should filter characters and apply the casing rules."""

    assert releaser.clean(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("defacto2.net", "DEFACTO2NET"),
        ("the blah", "THE BLAH"),
        ("  Defacto2  demo  group.", "DEFACTO2 DEMO GROUP"),
        ("Group inc.,RAZOR TO 1911", "GROUP INC, RAZOR TO 1911"),
        ("2000 ad", "2000 AD"),
        ("Lightforce,Pact,TRSi,Venom,Razor 1911,the System", "LIGHTFORCE, PACT, TRSI, VENOM, RAZOR 1911, THE SYSTEM"),
        ("coop", "COOP"),
        ("  the x bbs  ", "X BBS"),
        ("TDT / TRSi", "TDT TRSI"),
        ("TDT,TRSi", "TDT, TRSI"),
    ],
)
def test_cell_formats_uppercase_storage_keys(text: str, expected: str) -> None:
    """Cells should be uppercase and ignore stylized names."""

    assert releaser.cell(text) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("defacto2", "Defacto2"),
        ("razor-1911-demo", "Razor 1911 Demo"),
        ("razor-1911-demo*trsi", "Razor 1911 Demo, TRSi"),
        ("/razor-1911//", ""),
        ("razor-1911-demo#trsi", ""),
        ("razor-1911-ampersand-skillion", "Razor 1911 & Skillion"),
        ("razor-1911*trsi", "Razor 1911, TRSi"),
        ("north-american-pirate_phreak-association", "North American Pirate-Phreak Association"),
        ("2-minutes-to-midnight-bbs", "2 Minutes to Midnight BBS"),
        ("2000ad", "2000AD"),
        ("2tally-unrubbed", "2Tally Unrubbed"),
        ("2nd2none-bbs", "2ND2NONE BBS"),
        ("class*paradigm*razor-1911", "Class, Paradigm, Razor 1911"),
        ("down-town-bbs*bizare-bbs", "Down Town BBS, Bizare BBS"),
        ("united-software-association*fairlight", "United Software Association + Fairlight PC Division"),
        ("coop", "TDT / TRSi"),
        ("ACID-PRODUCTIONS", "ACiD Productions"),
    ],
)
def test_humanize_resolves_url_paths(path: str, expected: str) -> None:
    """Humanizing should prefer stylized names and degrade invalid paths to blanks."""

    assert releaser.humanize(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("united-software-association*fairlight", "UNITED SOFTWARE ASSOCIATION, FAIRLIGHT"),
        ("class*paradigm*razor-1911", "CLASS, PARADIGM, RAZOR 1911"),
        ("coop", "COOP"),
        ("path/to/file", ""),
    ],
)
def test_index_skips_stylized_names(path: str, expected: str) -> None:
    """Index keys should come from the decoded path alone."""

    assert releaser.index(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/home/ben/github/releaser", ""),
        ("class", "Class"),
        ("class*paradigm*razor-1911", "Class + Paradigm + Razor 1911"),
        ("class*paradigm*razor-1911-demo", "Class + Paradigm + Razor 1911 Demo"),
        ("united-software-association*fairlight", "United Software Association + Fairlight PC Division"),
        ("coop", "TDT / TRSi"),
        ("razor-1911-demo*trsi", "Razor 1911 Demo + TRSi"),
    ],
)
def test_link_joins_groups_with_plus(path: str, expected: str) -> None:
    """Link descriptions should separate collaborating groups with a plus."""

    assert releaser.link(path) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("hello", "hello"),
        ("coop", "coop"),
        ("tdt / trsi", "coop"),
        ("the quick brown fox", "the-quick-brown-fox"),
        ("h3ll0 w0rld!", "h3ll0-w0rld"),
        ("hello & world, foxes", "hello-ampersand-world*foxes"),
        ("nappa", "north-american-pirate_phreak-association"),
        ("The 12AM BBS.", "12am-bbs"),
        ("ACiD Productions", "acid-productions"),
        ("Razor 1911 Demo & Skillion", "razor-1911-demo-ampersand-skillion"),
        ("TDU-Jam!", "tdu_jam"),
        ("United Software Association + Fairlight PC Division", "united-software-association*fairlight"),
        ("TDT", "the-dream-team"),
        ("fltdox", "fairlight-dox"),
        ("Defacto2 Demo Group.", "defacto2-demo-group"),
        ("Razor", "razor-1911"),
    ],
)
def test_obfuscate_builds_url_paths(text: str, expected: str) -> None:
    """Obfuscation should prefer listed names and initialisms over encoding."""

    result = releaser.obfuscate(text)

    assert result == expected
    assert result == "" or releaser.is_valid(result)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("razor 1911", "Razor 1911"),
        (" _.=[   RaZoR 1911   ]=._ ", "Razor 1911"),
        ("coop", "TDT / TRSi"),
        ("tdt / trsi", "TDT / TRSi"),
        ("nappa", "North American Pirate-Phreak Association"),
    ],
)
def test_title_resolves_display_names(text: str, expected: str) -> None:
    """Titles should resolve listed names independent of casing and noise."""

    assert releaser.title(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Razor 1911,",
        ",Razor 1911",
        "abcd,",
        "ab,",
        "Razor 1911,,TRSi",
        "a, , b",
        "a&b&c",
        "hello &world",
        "Class, Paradigm, Razor 1911, ",
    ],
)
def test_obfuscate_stray_separators_still_yield_valid_paths(text: str) -> None:
    """Empty groups and loose ampersands should never leak into a URL path."""

    assert releaser.is_valid(releaser.obfuscate(text))


def test_title_ignores_trailing_comma() -> None:
    assert releaser.obfuscate("Razor 1911,") == "razor-1911"
    assert releaser.title("Razor 1911,") == "Razor 1911"


def test_obfuscate_then_humanize_is_not_an_exact_round_trip() -> None:
    """Casing is lossy, so humanizing an encoded name may restyle it."""

    assert releaser.obfuscate("ACiD Productions") == "acid-productions"
    assert releaser.humanize("acid-productions") == "ACiD Productions"
    assert releaser.humanize(releaser.obfuscate("MiRROR now bbS")) == "Mirror Now BBS"


def test_releaser_initialism_helpers_use_packaged_data() -> None:
    """Initialism helpers should expose the packaged alternates."""

    default = releaser.default_releaser()

    assert default.initialism("the-firm") == ("FiRM", "FRM")
    assert default.initialism("defacto2") == ("DF2",)
    assert default.is_initialism("some-random-bbs") is False
    assert default.join_initialisms("the-firm") == "FiRM, FRM"
    assert default.special("surprise-productions") == "Surprise! Productions"
    assert default.special("defacto2") == ""
