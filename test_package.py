#!/usr/bin/env python3
"""Test script to verify cardforge package imports work correctly."""

import sys
sys.path.insert(0, '.')

def main():
    # Test basic package import
    print('Testing cardforge package...')
    import cardforge
    print(f'  cardforge version: {cardforge.__version__}')

    # Test cards subpackage
    print('Testing cardforge.cards...')
    from cardforge.cards import composite, content, render, validate
    print('  composite, content, render, validate modules OK')

    # Test pipeline subpackage
    print('Testing cardforge.pipeline...')
    from cardforge.pipeline import cards
    print('  cards module OK')

    # Test support modules
    print('Testing cardforge support modules...')
    from cardforge import config, errors, fonts, prompts
    print('  config, errors, fonts, prompts modules OK')

    # Test CLI
    print('Testing cardforge.cli...')
    from cardforge.cli import cli
    print('  cli module OK')

    print()
    print('All package imports successful!')
    return 0


if __name__ == "__main__":
    sys.exit(main())
