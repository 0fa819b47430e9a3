#!/usr/bin/env python3
"""
Product Catalog Builder - Development Runner
Run this script to start the development server
"""

import os
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

os.environ.setdefault('FLASK_APP', 'catalog')
os.environ.setdefault('FLASK_ENV', 'development')

from catalog import create_app


def main():
    """Main entry point"""
    print("=" * 60)
    print("Product Catalog Builder - Development Server")
    print("=" * 60)

    app = create_app()

    print(f"Environment: {app.config.get('FLASK_ENV', 'unknown')}")
    print(f"Debug mode: {app.config.get('DEBUG', False)}")
    print(f"Log level: {app.config.get('LOG_LEVEL', 'INFO')}")
    print(f"Page size: {app.config['PAGE_WIDTH']} x {app.config['PAGE_HEIGHT']} pt, "
          f"grid {app.config['GRID_ROWS']}x{app.config['GRID_COLS']}")

    if not Path('config/settings.yaml').exists():
        print("⚠️  Missing config file: config/settings.yaml")
        print("   Built-in defaults will be used.")

    print("-" * 60)
    print("Starting development server...")
    print("POST the upload form to: http://localhost:5000/catalog")
    print("Press Ctrl+C to stop")
    print("-" * 60)

    app.run(
        host='0.0.0.0',
        port=5000,
        debug=app.config.get('DEBUG', True),
        use_reloader=True,
        threaded=True
    )


if __name__ == '__main__':
    main()
