#!/usr/bin/env python3
"""
SPARQL Client Command Line Interface

Runs one query or update against a SPARQL endpoint and prints the result.
"""

import argparse
import logging
import sys
from typing import Any, List, Optional

from tabulate import tabulate
from rdflib import Graph

from sparqlclient.client.client_factory import create_sparql_client
from sparqlclient.client.config.client_config_loader import SparqlClientConfig
from sparqlclient.client.utils.client_utils import SparqlClientError
from sparqlclient.results.solutions import Solutions


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="sparql-client - run a SPARQL query or update against an endpoint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sparql-client https://dbpedia.org/sparql "SELECT * WHERE { ?s ?p ?o } LIMIT 5"
  sparql-client --method GET https://query.wikidata.org/sparql "ASK { ?s ?p ?o }"
  sparql-client --protocol 1.1 --update http://localhost:3030/ds/update "CLEAR DEFAULT"
        """
    )
    
    parser.add_argument("endpoint", nargs="?", help="SPARQL endpoint URL (overrides the configured URL)")
    parser.add_argument("query", help="Query or update text; '-' reads it from stdin")
    parser.add_argument("--config", "-c", type=str, help="Path to a client configuration YAML file")
    parser.add_argument("--method", "-m", type=str, help="HTTP method: GET or POST")
    parser.add_argument("--protocol", "-p", type=str, help="SPARQL protocol version: 1.0 or 1.1")
    parser.add_argument("--content-type", type=str, help="Result media type to request and decode")
    parser.add_argument("--timeout", "-t", type=float, help="Request timeout in seconds")
    parser.add_argument("--update", "-u", action="store_true", help="Send the text as a SPARQL update")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    
    return parser.parse_args(argv)


def format_result(result: Any) -> str:
    """Render a decoded result for the terminal."""
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, Solutions):
        variables = result.variables or sorted({name for row in result for name in row})
        rows = [[row[name].n3() if name in row else "" for name in variables] for row in result]
        return tabulate(rows, headers=[f"?{name}" for name in variables], tablefmt="simple")
    if isinstance(result, Graph):
        return result.serialize(format="nt").strip()
    if isinstance(result, bytes):
        return f"<{len(result)} bytes of opaque result data>"
    if result is None:
        return "(no result)"
    return str(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sparql-client command."""
    args = parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    text = sys.stdin.read() if args.query == "-" else args.query
    
    try:
        config = SparqlClientConfig(args.config) if args.config else SparqlClientConfig.from_dict({})
        with create_sparql_client(config=config, url=args.endpoint, method=args.method,
                                  protocol=args.protocol, timeout=args.timeout) as client:
            if args.update:
                client.update(text, content_type=args.content_type)
                print("OK")
            else:
                print(format_result(client.query(text, content_type=args.content_type)))
    except SparqlClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
