"""
Flask routes for Product Catalog Builder
Accepts the logo/product upload form and returns the catalog
"""

import io
import re
import uuid
from typing import Dict, List
from flask import Blueprint, current_app, jsonify, request, send_file
from loguru import logger

from .decode import decode_image
from .errors import CatalogError, PageNotFoundError, ValidationError
from .models import CatalogRequest, ProductInput


bp = Blueprint('main', __name__)

_PRODUCT_FIELD = re.compile(r'^products-(\d+)-(name|price|description|images)$')


def _catalog_ext(name: str):
    return current_app.extensions['catalog'][name]


def _decode_upload(storage):
    config = _catalog_ext('config')
    return decode_image(
        storage.read(),
        storage.filename,
        max_size=config.MAX_UPLOAD_SIZE,
        allowed_extensions=config.ALLOWED_EXTENSIONS,
    )


def parse_catalog_form(form, files) -> CatalogRequest:
    """
    Build a CatalogRequest from the multipart upload form.

    Products use indexed field names: products-0-name, products-0-price,
    products-0-description and one or more files under products-0-images.
    """
    logo_file = files.get('logo')
    logo = _decode_upload(logo_file) if logo_file and logo_file.filename else None

    indices = set()
    for key in list(form.keys()) + list(files.keys()):
        match = _PRODUCT_FIELD.match(key)
        if match:
            indices.add(int(match.group(1)))

    products: List[ProductInput] = []
    for idx in sorted(indices):
        uploads = [f for f in files.getlist(f'products-{idx}-images') if f and f.filename]
        products.append(ProductInput(
            name=form.get(f'products-{idx}-name', ''),
            images=tuple(_decode_upload(f) for f in uploads),
            price=form.get(f'products-{idx}-price', ''),
            description=form.get(f'products-{idx}-description', ''),
        ))

    return CatalogRequest(
        logo=logo,
        company_name=form.get('company_name', ''),
        products=tuple(products),
    )


def error_response(error: CatalogError, session_id: str):
    if isinstance(error, ValidationError):
        logger.warning(f"Validation error in session {session_id}: {error}")
    else:
        logger.error(f"Processing error in session {session_id}: {error}")
    payload: Dict = error.to_dict()
    payload['session_id'] = session_id
    return jsonify(payload), error.status_code


@bp.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@bp.route('/catalog', methods=['POST'])
def catalog():
    """Build the catalog and return it as a PDF download"""
    session_id = str(uuid.uuid4())
    try:
        catalog_request = parse_catalog_form(request.form, request.files)
        logger.info(f"Session {session_id} started - company: {catalog_request.company_name!r}, "
                    f"products: {len(catalog_request.products)}")

        built = _catalog_ext('builder').build(catalog_request)
        pdf_bytes = _catalog_ext('renderer').render(built)
    except CatalogError as e:
        return error_response(e, session_id)

    return send_file(
        io.BytesIO(pdf_bytes),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=built.filename,
    )


@bp.route('/preview', methods=['POST'])
def preview():
    """Render one catalog page as PNG; page 0 is the cover"""
    session_id = str(uuid.uuid4())
    page_index = request.args.get('page', 0, type=int)
    try:
        built = _catalog_ext('builder').build(parse_catalog_form(request.form, request.files))
        if not 0 <= page_index < built.page_count:
            raise PageNotFoundError(page_index, built.page_count)

        image = _catalog_ext('preview').render(built.pages[page_index], built.page_size)
    except CatalogError as e:
        return error_response(e, session_id)

    buffer = io.BytesIO()
    image.save(buffer, 'PNG')
    buffer.seek(0)
    return send_file(buffer, mimetype='image/png')
