import argparse
import logging
import sys

from rsakeyconv import KeyConversionError, KeyFormat, UnrecognizedFormat, convert


PRIVATE_KEY_REQUIRED = "Error: must supply a private key to use -q or -s!"

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

def setup_argparse():
    """
    Sets up the argument parser for the command-line interface.
    """
    parser = argparse.ArgumentParser(
        description="Convert RSA keys between PEM, RFC 3110, hex DER and Racoon formats. "
                    "The input format is detected automatically.")

    # Output format options
    output_group = parser.add_argument_group("output formats (at least one is required)")
    output_group.add_argument("-r", dest="formats", action="append_const", const=KeyFormat.RFC3110,
                              help="RFC 3110 public key (0s...).")
    output_group.add_argument("-d", dest="formats", action="append_const", const=KeyFormat.HEX_DER,
                              help="Hex-encoded DER public key.")
    output_group.add_argument("-p", dest="formats", action="append_const", const=KeyFormat.PEM_PUBLIC,
                              help="PEM public key (SubjectPublicKeyInfo).")
    output_group.add_argument("-q", dest="formats", action="append_const", const=KeyFormat.PEM_PRIVATE,
                              help="PEM private key (PKCS#1).")
    output_group.add_argument("-s", dest="formats", action="append_const", const=KeyFormat.RACOON,
                              help="Racoon/strongSwan private key block.")

    # Input/output options
    parser.add_argument("-i", "--input-file", help="Path to the input key file (default: stdin).", default=None)
    parser.add_argument("-o", "--output-file", help="Path to the output file (default: stdout).", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debugging information.")

    return parser

def read_input(input_file):
    """
    Reads the whole key input before any processing.

    Args:
        input_file (str): The path to the input file (or None for stdin).
    """
    if input_file:
        with open(input_file, "r") as f:
            return f.read()
    return sys.stdin.read()

def write_output(output_text, output_file):
    """
    Writes the converted key text.

    Args:
        output_text (str): The concatenated encoder outputs.
        output_file (str): The path to the output file (or None for stdout).
    """
    if output_file:
        with open(output_file, "w") as f:
            f.write(output_text)
        logging.info(f"Key data written to {output_file}")
    else:
        sys.stdout.write(output_text)
        sys.stdout.flush()

def convert_key(input_data, formats, output_file, parser):
    """
    Converts the input key to every requested output format.

    Args:
        input_data (str): The raw input buffer holding one key.
        formats (list): The requested KeyFormat values.
        output_file (str): The path to the output file (or None for stdout).
        parser (argparse.ArgumentParser): Used to print usage on unrecognized input.
    """
    try:
        result = convert(input_data, formats)
    except UnrecognizedFormat as e:
        logging.error(f"Error: {e}")
        parser.print_help(sys.stderr)
        sys.exit(1)
    except KeyConversionError as e:
        logging.error(f"Error: {e}")
        sys.exit(1)

    if result.skipped:
        print(PRIVATE_KEY_REQUIRED, file=sys.stderr)

    output_text = "".join(text for _, text in result.outputs)
    if output_text:
        write_output(output_text, output_file)


def main(argv=None):
    """
    Main function to execute the RSA key conversion.
    """
    parser = setup_argparse()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.formats:
        parser.print_help(sys.stderr)  # Show help if no output format is specified.
        sys.exit(1)

    try:
        input_data = read_input(args.input_file)
    except FileNotFoundError:
        logging.error(f"Error: Input file not found: {args.input_file}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading input: {e}")
        sys.exit(1)

    try:
        convert_key(input_data, args.formats, args.output_file, parser)
    except OSError as e:
        logging.error(f"Error writing output: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()

# Usage Examples:
#
# 1. Convert a PEM public key to RFC 3110 form:
#    python main.py -r < public_key.pem
#
# 2. Print a private key as PEM public key, hex DER and RFC 3110 at once:
#    python main.py -r -p -d -i private_key.pem
#
# 3. Convert a PEM private key into a Racoon/strongSwan secrets block:
#    python main.py -s -i private_key.pem -o ipsec.secrets.part
#
# 4. Turn a Racoon secrets block back into a PKCS#1 PEM private key:
#    python main.py -q < ipsec.secrets.part
