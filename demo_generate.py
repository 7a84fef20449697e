#!/usr/bin/env python3
"""
Demo: Generate AssemblyInfo files from one example config.

Renders the same config as C# and VB.NET.
"""

import dataclasses

from asminfo.examples import build_example_config
from asminfo.generator import generate, save_output_file
from asminfo.serialization import config_to_yaml


def main():
    config = build_example_config()

    print("=" * 80)
    print("ASSEMBLY INFO DEMO")
    print("=" * 80)

    print("\nCONFIG (YAML):")
    print("-" * 80)
    print(config_to_yaml(config))

    targets = [
        ("cs", "AssemblyInfo.cs"),
        ("vb", "AssemblyInfo.vb"),
    ]

    for language, filename in targets:
        variant = dataclasses.replace(config, language=language, output_file=filename)
        print(f"\n{language.upper()} OUTPUT:")
        print("-" * 80)
        print(generate(variant).text)

        save_output_file(variant)
        print(f"\nSaved to: {filename}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
