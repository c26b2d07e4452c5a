#!/usr/bin/env python3
"""
Interactive CLI demo for verb lookup.

Type a word (any tense, with or without typos) and see the verb it resolves
to plus the autocomplete candidates.
"""
import asyncio
import json
import logging
import sys

# Imports assume PYTHONPATH=src is set (e.g., PYTHONPATH=src python demo/cli_demo.py)
from verb_lookup import ConfigurationError, VerbLookupError, create_verb_resolver, load_config_from_env

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Verb Lookup - Interactive CLI Demo")
    print("=" * 60)
    print("\nType a verb in any form:")
    print("  • run        (exact key)")
    print("  • RAN        (inflected form)")
    print("  • runn       (typo)")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_result(query, result, candidates):
    """Print formatted lookup result."""
    print(f"\n🔎 Query: {query}")
    
    if result is None:
        print("❓ No matching verb")
    else:
        line = f"📘 Verb: {result.verb} ({result.match_kind.value}"
        if result.score is not None:
            line += f", score {result.score:.3f}"
        print(line + ")")
        print(json.dumps(result.entry, indent=2, ensure_ascii=False))
    
    if candidates:
        listed = ", ".join(
            c.verb if c.score is None else f"{c.verb} ({c.score:.2f})" for c in candidates
        )
        print(f"💡 Candidates: {listed}")
    
    print("-" * 60)


async def lookup(resolver, query):
    result = await resolver.find_verb_entry(query)
    candidates = await resolver.search_verb_candidates(query)
    return result, candidates


def main():
    """Main CLI loop."""
    print_banner()
    
    try:
        config = load_config_from_env()
    except ConfigurationError as e:
        print(f"\n❌ Invalid configuration: {e}")
        return 1
    
    resolver = create_verb_resolver(config)
    loop = asyncio.new_event_loop()
    
    try:
        while True:
            try:
                query = input("Verb: ").strip()
            except KeyboardInterrupt:
                print("\n\n👋 Interrupted. Goodbye!\n")
                break
            except EOFError:
                print("\n\n👋 Goodbye!\n")
                break
            
            if not query:
                continue
            
            if query.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!\n")
                break
            
            try:
                result, candidates = loop.run_until_complete(lookup(resolver, query))
            except VerbLookupError as e:
                # Dictionary failures are sticky; nothing more can be answered
                print(f"\n❌ Could not load the verb dictionary: {e}")
                return 1
            
            print_result(query, result, candidates)
    finally:
        loop.close()
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
