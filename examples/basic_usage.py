"""Basic usage of the token-counter library API.

Run with: python examples/basic_usage.py
"""

from token_counter import count_stats, count_tokens, load_default_tokenizer


def main() -> None:
    encoder = load_default_tokenizer()

    text = "Hello, world! This is a token counting example."
    print(f'Text: "{text}"')
    print(f"Token count: {count_tokens(text, encoder)}\n")

    longer_text = (
        "The quick brown fox jumps over the lazy dog.\n"
        "This is a second line to demonstrate line counting."
    )
    stats = count_stats(longer_text, encoder)
    print("Full statistics:")
    print(f"  Tokens: {stats.tokens}")
    print(f"  Lines:  {stats.lines}")
    print(f"  Bytes:  {stats.bytes}")


if __name__ == "__main__":
    main()
