#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""Regenerate the emojibase snapshot bundled in emojisearcher/res."""

from __future__ import annotations

import argparse
import json
import zipfile
from pathlib import Path

from emojisearcher import logger
from emojisearcher.db import RES_DIR
from emojisearcher.request import DATA_LOCALE, EMOJIBASE_URL, HttpRemoteProvider
from emojisearcher.shortcodes import SHORTCODE_SOURCES


def write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def update_bundle(provider: HttpRemoteProvider, output_dir: Path) -> str:
    package_json = provider.fetch_package_json()
    emojis = provider.fetch_emojis()

    output_dir.mkdir(parents=True, exist_ok=True)
    write_json(output_dir / "package.json", {"version": package_json["version"]})
    write_json(output_dir / "data.json", emojis)

    with zipfile.ZipFile(output_dir / "shortcodes.zip", mode="w") as archive:
        for source in SHORTCODE_SOURCES:
            shortcodes = provider.fetch_shortcodes(source)
            archive.writestr(
                zipfile.ZipInfo(f"{source}.json"),
                json.dumps(shortcodes, ensure_ascii=False),
                compress_type=zipfile.ZIP_DEFLATED,
            )

    return package_json["version"]


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default=EMOJIBASE_URL)
    parser.add_argument("--locale", default=DATA_LOCALE)
    parser.add_argument("--output", type=Path, default=RES_DIR)
    args = parser.parse_args()

    provider = HttpRemoteProvider(base_url=args.base_url, locale=args.locale)
    version = update_bundle(provider, args.output)
    logger.info(f"Wrote emojibase {version} to {args.output}")


if __name__ == "__main__":
    main()
