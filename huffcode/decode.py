import argparse, sys
from huffcode.codec import HuffmanCoding
from huffcode.encode import setup_logging
from huffcode.errors import HuffmanError

def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a Huffman-encoded file.")
    ap.add_argument("--source", required=True, help="source text the encoder was built from")
    ap.add_argument("--input", required=True, help="path to encoded file")
    ap.add_argument("--output", required=True, help="path to decoded text")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    # the encoded file carries no table; rebuild the same tree from the source
    hc = HuffmanCoding(args.source)
    try:
        hc.make_sorted_list()
        hc.make_tree()
        text = hc.decode(args.input, args.output)
    except HuffmanError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 1

    print(f"[decode] wrote {args.output} chars={len(text)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
