"""Hand-authored content tables for the home, music and projects pages.

Everything here is built once at import time and never mutated. The order
of each table is the order it is displayed in.
"""

from datetime import date
from typing import Tuple

from trigex_site.schemas import Link, PageData, Track, Project

SITE_NAME = "trigex.moe"

BIO = (
    "Hi I'm Trigex! Welcome to my corner of the internet! I'm a software developer, "
    "music producer, DJ, and sysadmin. (BSDs preferred ;)). I unfortunately reside in "
    "California, but I hope that'll change one day. Always looking for work!"
)

PROFILE_LINKS: Tuple[Link, ...] = (
    Link(name="GitHub", url="https://github.com/Trigex"),
    Link(name="Soundcloud", url="https://soundcloud.com/trigex"),
    Link(name="Instagram", url="https://www.instagram.com/seth.stokley/"),
    Link(name="Youtube", url="https://www.youtube.com/Trigex"),
    Link(name="Email", url="mailto:trigex@trigex.moe"),
)


def build_home_page(site_name: str = SITE_NAME) -> PageData:
    """Profile record for the home page, titled with the configured site name."""
    return PageData(
        title=site_name,
        name=site_name,
        bio=BIO,
        links=list(PROFILE_LINKS),
    )


HOME_PAGE = build_home_page()

_DL = "https://static.termer.net/download"

TRACKS: Tuple[Track, ...] = (
    Track(
        title="Misantrophic Drunken Terror",
        flac_url=f"{_DL}/9nr7rzpvyg/Misantrophic%20Drunken%20Terror.flac",
        mp3_url=f"{_DL}/qym8owcsce/Misantrophic%20Drunken%20Terror.mp3",
        youtube_url="https://www.youtube.com/watch?v=KZY7tkzlsys",
        soundcloud_url="https://soundcloud.com/trigex/trigex-misantrophic-drunken",
        release_date=date(2025, 4, 18),
        cover_image="misanthropic.png",
    ),
    Track(
        title="Alice in Psytrance Land",
        flac_url=f"{_DL}/l7d9qfnker/Alice%20in%20Psytrance%20Land.flac",
        mp3_url=f"{_DL}/utp0nbm3sr/Alice%20in%20Psytrance%20Land.mp3",
        youtube_url="https://www.youtube.com/watch?v=8oRJMt3x6iw",
        soundcloud_url="https://soundcloud.com/trigex/alice-in-psytrance-land",
        release_date=date(2025, 4, 8),
        cover_image="alice.png",
    ),
    Track(
        title="Guru Guru",
        flac_url=f"{_DL}/of1cgo07e6/Trigex%20-%20Guru%20Guru.flac",
        mp3_url=f"{_DL}/gnacpph7b1/Trigex%20-%20Guru%20Guru.mp3",
        youtube_url="https://www.youtube.com/watch?v=YRtf9nKzbEw",
        soundcloud_url="https://soundcloud.com/trigex/guru-guru",
        release_date=date(2025, 2, 22),
        cover_image="guru.png",
    ),
    Track(
        title="I Can Say Whatever I Want",
        mp3_url=f"{_DL}/ql1swhlino/whatever.mp3",
        youtube_url="https://www.youtube.com/watch?v=TLtzR51fdpk",
        soundcloud_url="https://soundcloud.com/trigex/i-can-say-whatever-i-want",
        release_date=date(2025, 1, 21),
        cover_image="whatever.png",
    ),
    Track(
        title="S3RL - Fan Service (Trigex Kick Edit)",
        flac_url=f"{_DL}/6qlpxygqjs/S3RL%20-%20Fan%20Service%20(Trigex%20Kick%20Edit).flac",
        mp3_url=f"{_DL}/m1mfeg7q5e/S3RL%20-%20Fan%20Service%20(Trigex%20Kick%20Edit).mp3",
        youtube_url="https://youtu.be/g2J7a9OynnA",
        soundcloud_url="https://soundcloud.com/trigex/s3rl-fan-service-trigex-kick-edit",
        release_date=date(2024, 6, 9),
        cover_image="fan.png",
    ),
    Track(
        title="World's Smallest Violin (Trigex Happy Hardcore Bootleg)",
        # Lossless copy is hosted on Google Drive rather than the file host
        flac_url="https://drive.google.com/file/d/1VH0CVeGEhf23RIW5qBRarELAjG7plH74/view?usp=sharing",
        mp3_url=f"{_DL}/s6br7edtwi/AJR%20-%20World's%20Smallest%20Violin%20(Final%20Probably).mp3",
        youtube_url="https://www.youtube.com/watch?v=5NXa6Egecug",
        soundcloud_url="https://soundcloud.com/trigex/worlds-smallest-violin-trigex-happy-hardcore-bootleg",
        release_date=date(2024, 5, 31),
        cover_image="violin.png",
    ),
    Track(
        title="Aubz Sneeze",
        flac_url=f"{_DL}/ktxke53zfx/Trigex%20-%20Aubz%20Sneeze.flac",
        mp3_url=f"{_DL}/y0ka6o8ygh/Trigex%20-%20Aubz%20Sneeze.mp3",
        youtube_url="https://www.youtube.com/watch?v=EOQjTTWu4qc",
        soundcloud_url="https://soundcloud.com/trigex/aubz-sneeze",
        release_date=date(2024, 5, 23),
        cover_image="aubz.png",
    ),
    Track(
        title="Pedro (Trigex Uptempo Remix)",
        flac_url=f"{_DL}/eyt6p0ne7v/Raffaella%20Carra%CC%80%20-%20Pedro%20(Trigex%20Uptempo%20Remix).flac",
        mp3_url=f"{_DL}/l04jk9fdll/Raffaella%20Carra%CC%80%20-%20Pedro%20(Trigex%20Uptempo%20Remix).mp3",
        youtube_url="https://www.youtube.com/watch?v=ZeeZyzhe-Xk",
        release_date=date(2024, 5, 23),
        cover_image="pedro.png",
    ),
    Track(
        title="Smiling Friends (Makina Mix)",
        flac_url=f"{_DL}/qmw1lqiz1o/Trigex%20-%20Smiling%20Friends%20(Makina%20Mix).flac",
        mp3_url=f"{_DL}/z1expkcm8e/Trigex%20-%20Smiling%20Friends%20(Makina%20Mix).mp3",
        youtube_url="https://www.youtube.com/watch?v=JyhCesdnIS0",
        soundcloud_url="https://soundcloud.com/trigex/smiling-friends-makina-mix",
        release_date=date(2024, 4, 9),
        cover_image="smiling.png",
    ),
    Track(
        title="Super Idol 的笑容 (Trigex Makinatempo Remix)",
        flac_url=f"{_DL}/csn3vodpep/Super%20Idol%20(Trigex%20Makinatempo%20Remix).flac",
        mp3_url=f"{_DL}/j7ycis9yd5/Super%20Idol%20(Trigex%20Makinatempo%20Remix).mp3",
        youtube_url="https://www.youtube.com/watch?v=TSM6cz_yOpo",
        soundcloud_url="https://soundcloud.com/trigex/super-idol-trigex-makinatempo-remix",
        release_date=date(2024, 1, 16),
        cover_image="idol.png",
    ),
    Track(
        title="That's So Gay",
        flac_url=f"{_DL}/iir6r19aop/thatssogay.flac",
        mp3_url=f"{_DL}/ah1zohpxex/thatssogay.mp3",
        youtube_url="https://www.youtube.com/watch?v=ibLjholRJgQ",
        soundcloud_url="https://soundcloud.com/trigex/thats-so-gay",
        release_date=date(2023, 9, 26),
        cover_image="gay.png",
    ),
    Track(
        title="Kill Me, Baby",
        flac_url=f"{_DL}/or5unjghec/Trigex%20-%20Kill%20Me%20%20Baby.flac",
        mp3_url=f"{_DL}/x77kg5ew64/Trigex%20-%20Kill%20Me%20%20Baby.mp3",
        youtube_url="https://www.youtube.com/watch?v=mT2og6R1XtI",
        soundcloud_url="https://soundcloud.com/trigex/kill-me-baby",
        release_date=date(2023, 8, 28),
        cover_image="baby.png",
    ),
    Track(
        title="Creeds - Push Up (Trigex Uptempo Bootleg)",
        flac_url=f"{_DL}/ednyc7j4pe/Creeds%20-%20Push%20Up%20(Trigex%20Uptempo%20Bootleg).flac",
        mp3_url=f"{_DL}/u91dsw7hhm/Creeds%20-%20Push%20Up%20(Trigex%20Uptempo%20Bootleg).mp3",
        youtube_url="https://www.youtube.com/watch?v=o5JnASJYGNI",
        soundcloud_url="https://soundcloud.com/trigex/push-up-trigex-uptempo-bootleg",
        release_date=date(2023, 4, 6),
        cover_image="pushup.png",
    ),
    Track(
        title="Pill Provider",
        flac_url=f"{_DL}/i1n1g6fpug/Pill%20Provider.flac",
        mp3_url=f"{_DL}/w9i6gtuu7y/Pill%20Provider.mp3",
        youtube_url="https://www.youtube.com/watch?v=UjYQ-CN6SNU",
        soundcloud_url="https://soundcloud.com/trigex/pill-provider",
        release_date=date(2023, 1, 4),
        cover_image="pill.png",
    ),
)

PROJECTS: Tuple[Project, ...] = (
    Project(
        name="convert-muh-music",
        description="A bulk audio library transcoder with sane defaults",
        repo_url="https://github.com/Trigex/convert-muh-music",
        tech_stack="Go, Python (For the working script, the Go version is a wip)",
    ),
    Project(
        name="AlphaNET",
        description=(
            "AlphaNET was going to be a hacking & cracking style MMO with a whole virtual "
            "operating system and scripting, but never ended up finished..."
        ),
        repo_url="https://github.com/Trigex/AlphaNET",
        tech_stack="C#, .NET Standard",
    ),
    Project(
        name="TextchBlazor",
        description=(
            "TextchBlazor was a 2channel-style front-end for my friend's Textbin project, "
            "but neither are active anymore"
        ),
        repo_url="https://github.com/Trigex/TextchBlazor",
        tech_stack="C#, Blazor",
    ),
)
