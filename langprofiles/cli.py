"""
Command-Line Interface for langprofiles.

Usage:
    langprofiles list                        # List built-in locales
    langprofiles info ja                     # Show a profile's grams and script
    langprofiles info en -d profiles/        # Same, from a directory
    langprofiles check                       # Report foreign-script grams
    langprofiles clean raw/ -o cleaned/      # Filter a directory of profiles
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    from langprofiles import __version__

    parser = argparse.ArgumentParser(
        prog="langprofiles",
        description="N-gram language profiles - load, inspect and clean",
    )
    parser.add_argument("--version", action="version", version=f"langprofiles {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log loading and filtering details")
    parser.add_argument("--config", metavar="FILE", help="JSON config with 'reader' and 'filter' sections")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # --- list ---
    subparsers.add_parser("list", help="List built-in locales")

    # --- info ---
    info_parser = subparsers.add_parser("info", help="Show profile information")
    info_parser.add_argument("locale", help="Locale tag (e.g., en, zh-CN)")
    info_parser.add_argument("-d", "--dir", help="Profile directory (default: built-in profiles)")

    # --- check ---
    check_parser = subparsers.add_parser("check", help="Report grams in foreign scripts")
    check_parser.add_argument("-d", "--dir", help="Profile directory (default: built-in profiles)")
    check_parser.add_argument("-s", "--show", type=int, default=0, metavar="N", help="Show up to N foreign grams per profile")

    # --- clean ---
    clean_parser = subparsers.add_parser("clean", help="Remove foreign-script grams from a profile directory")
    clean_parser.add_argument("source", help="Directory of profile files")
    clean_parser.add_argument("-o", "--output", required=True, help="Output directory")
    clean_parser.add_argument("--policy", choices=["strict", "drop"], help="Mixed-script gram policy")

    return parser


def load_settings(args):
    """Build (ReaderConfig, FilterConfig) from --config and flags."""
    from langprofiles.models import FilterConfig, ReaderConfig, load_config

    if args.config:
        reader_config, filter_config = load_config(Path(args.config))
    else:
        reader_config, filter_config = ReaderConfig(), FilterConfig()

    policy = getattr(args, "policy", None)
    if policy:
        filter_config = dataclasses.replace(filter_config, mixed_script_policy=policy)
    return reader_config, filter_config


def load_profiles(args, reader) -> list:
    """Profiles from --dir, or the built-in set."""
    if getattr(args, "dir", None):
        return reader.read_from_directory(Path(args.dir))
    return reader.read_all_builtin()


def cmd_list(args) -> int:
    """List built-in locales."""
    from langprofiles.locale import builtin_locales

    locales = builtin_locales()
    print(f"Built-in locales ({len(locales)}):")
    for locale in locales:
        print(f"  {locale}")
    return 0


def cmd_info(args) -> int:
    """Show profile information."""
    from langprofiles.reader import LanguageProfileReader
    from langprofiles.scripts import count_scripts, dominant_script

    try:
        reader_config, filter_config = load_settings(args)
        reader = LanguageProfileReader(config=reader_config)

        if args.dir:
            profile = reader.read_file(Path(args.dir) / args.locale)
        else:
            profile = reader.read_builtin(args.locale)

        print(f"Profile: {profile.locale}")
        for length in profile.gram_lengths:
            print(
                f"  {length}-grams: {profile.num_grams(length):,} distinct, "
                f"{profile.num_gram_occurrences(length):,} occurrences"
            )

        print(f"Dominant script: {dominant_script(profile, filter_config).value}")
        print("Scripts:")
        for script, tally in count_scripts(profile, filter_config).most_common():
            print(f"  {script.value}: {tally}")
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def cmd_check(args) -> int:
    """Report foreign-script grams per profile."""
    from langprofiles.filtering import foreign_grams
    from langprofiles.reader import LanguageProfileReader
    from langprofiles.scripts import ScriptIntegrityError, dominant_script

    try:
        reader_config, filter_config = load_settings(args)
        reader = LanguageProfileReader(config=reader_config)
        profiles = load_profiles(args, reader)
    except Exception as e:
        print(f"Error: {e}")
        return 1

    failed = 0
    for profile in profiles:
        try:
            script = dominant_script(profile, filter_config)
            foreign = foreign_grams(profile, filter_config)
        except ScriptIntegrityError as e:
            print(f"  {profile.locale}: FAILED - {e}")
            failed += 1
            continue

        total = sum(len(grams) for grams in foreign.values())
        print(f"  {profile.locale}: {script.value}, {total} foreign grams")
        if args.show and total:
            shown = [g for grams in foreign.values() for g in grams][:args.show]
            print(f"    {' '.join(repr(g) for g in shown)}")

    print(f"\nChecked {len(profiles)} profiles, {failed} failed")
    return 1 if failed else 0


def cmd_clean(args) -> int:
    """Filter every profile in a directory and write the results."""
    from langprofiles.filtering import filter_all
    from langprofiles.reader import LanguageProfileReader, encode_profile

    try:
        reader_config, filter_config = load_settings(args)
        reader = LanguageProfileReader(config=reader_config)

        profiles = reader.read_from_directory(Path(args.source))
        if not profiles:
            print(f"No profiles found in {args.source}")
            return 0

        cleaned = filter_all(profiles, filter_config)

        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        for before, after in zip(profiles, cleaned):
            out_path = output_dir / str(after.locale)
            out_path.write_bytes(encode_profile(after, reader_config.encoding))
            removed = before.num_grams() - after.num_grams()
            print(f"  {after.locale}: removed {removed} of {before.num_grams()} grams")

        print(f"\nWrote {len(cleaned)} profiles to {output_dir}")
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "check": cmd_check,
        "clean": cmd_clean,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
