"""Main entry point for chunking a document into search-index records."""

import sys
import json
import logging
import argparse
from pathlib import Path
from pydantic import ValidationError
from docchunk.config import ChunkerSettings
from docchunk.document_loader import DocumentLoader
from docchunk.indexing import prepare_index_documents


def main():
    """Main function to run the document chunker."""
    parser = argparse.ArgumentParser(
        description="Split a document into overlapping chunks ready for search indexing"
    )
    parser.add_argument(
        "document_path",
        help="Path to the document file to process (.txt, .md, .pdf, .docx or a saved analysis .json)"
    )
    parser.add_argument(
        "--sections",
        action="store_true",
        help="Keep tables, key/value pairs and lists whole (for layout-analysis output)"
    )
    parser.add_argument(
        "--department",
        default="",
        help="Department name stored on each record"
    )
    parser.add_argument(
        "--output",
        default="outputs",
        help="Directory for the chunk JSON file (default: outputs)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    document_path = Path(args.document_path)
    if not document_path.exists():
        print(f"Error: Document not found at {document_path}")
        sys.exit(1)

    try:
        settings = ChunkerSettings.from_env()
    except ValidationError as e:
        print(f"✗ Invalid chunker settings: {e}")
        sys.exit(1)

    print(f"Processing document: {document_path}")
    print(f"  chunk size {settings.chunk_size}, overlap {settings.chunk_overlap}")
    print("-" * 50)

    try:
        paragraphs = DocumentLoader(settings).load_paragraphs(str(document_path))
        documents = prepare_index_documents(
            file_name=document_path.name,
            paragraphs=paragraphs,
            document_id=document_path.stem,
            department_name=args.department,
            use_sections=args.sections,
            settings=settings,
        )
    except ValueError as e:
        print(f"\n✗ {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\n✗ Error during chunking: {e}")
        sys.exit(1)

    print(f"\n✓ Chunking complete!")
    print(f"  - Paragraphs loaded: {len(paragraphs)}")
    print(f"  - Chunks produced: {len(documents)}")

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{document_path.stem}_chunks.json"
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump([doc.for_search_index() for doc in documents], f, ensure_ascii=False, indent=2)
    print(f"\n✓ Results exported:")
    print(f"  - JSON: {json_path}")

    print("\nSample Chunks:")
    for doc in documents[:3]:
        preview = doc.page_content[:80].replace("\n", " ")
        print(f"  - [{doc.chunk_index}] {preview}")
    if len(documents) > 3:
        print(f"  ... and {len(documents) - 3} more chunks")


if __name__ == "__main__":
    main()
