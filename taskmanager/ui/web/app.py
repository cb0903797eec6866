"""
Flask JSON API for creating, reading, updating, deleting and paging tasks.
"""
import logging
import re
from typing import Any, Dict

from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException

from taskmanager.core.db import TaskDatabase
from taskmanager.core.config import get_db_path
from taskmanager.core.errors import TaskError, InvalidPageOrSizeError, ErrorKind
from taskmanager.services.tasks import TaskService

logger = logging.getLogger(__name__)

app = Flask(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong"
PAGE_VALUE_PATTERN = re.compile(r"-?[0-9]+")


def get_db():
    """Get database instance."""
    return TaskDatabase(get_db_path())


def get_json_body() -> Dict[str, Any]:
    """Request body as a dict; anything that is not a JSON object counts as empty."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def parse_page_value(value: str) -> int:
    if not PAGE_VALUE_PATTERN.fullmatch(value):
        raise InvalidPageOrSizeError("Page and size must be integers")
    return int(value)


@app.errorhandler(TaskError)
def handle_task_error(error: TaskError):
    """Map a task error to its status code and JSON body."""
    if error.status_code >= 500:
        logger.error("Task service failure: %s", error.message, exc_info=error)
        return jsonify({
            'error': ErrorKind.UNCLASSIFIED.value,
            'message': INTERNAL_ERROR_MESSAGE
        }), 500
    return jsonify(error.to_dict()), error.status_code


@app.errorhandler(Exception)
def handle_unexpected_error(error: Exception):
    """Answer 500 for anything unexpected, without leaking details."""
    if isinstance(error, HTTPException):
        return error
    logger.error("Unhandled error on %s %s", request.method, request.path, exc_info=error)
    return jsonify({
        'error': ErrorKind.UNCLASSIFIED.value,
        'message': INTERNAL_ERROR_MESSAGE
    }), 500


@app.route('/health')
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})


@app.route('/tasks', methods=['POST'])
@app.route('/api/v1/tasks', methods=['POST'])
def create_task():
    """Create a task."""
    body = get_json_body()
    db = get_db()
    try:
        task = TaskService(db).create_task(
            title=body.get('title'),
            description=body.get('description'),
            status=body.get('status'),
            due_date=body.get('dueDate'),
        )
        return jsonify(task.to_dict()), 201
    finally:
        db.close()


@app.route('/tasks/<task_id>', methods=['GET'])
@app.route('/api/v1/tasks/<task_id>', methods=['GET'])
def get_task(task_id):
    """Get a single task."""
    db = get_db()
    try:
        task = TaskService(db).get_task(task_id)
        return jsonify(task.to_dict())
    finally:
        db.close()


@app.route('/tasks/<task_id>', methods=['PUT'])
@app.route('/api/v1/tasks/<task_id>', methods=['PUT'])
def update_task(task_id):
    """Replace the editable fields of a task."""
    body = get_json_body()
    db = get_db()
    try:
        task = TaskService(db).update_task(
            task_id,
            title=body.get('title'),
            description=body.get('description'),
            status=body.get('status'),
            due_date=body.get('dueDate'),
        )
        return jsonify(task.to_dict())
    finally:
        db.close()


@app.route('/tasks/<task_id>', methods=['DELETE'])
@app.route('/api/v1/tasks/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    """Soft-delete a task."""
    db = get_db()
    try:
        TaskService(db).delete_task(task_id)
        return '', 204
    finally:
        db.close()


@app.route('/tasks/page/<page>/size/<size>', methods=['GET'])
@app.route('/api/v1/tasks/page/<page>/size/<size>', methods=['GET'])
def list_tasks(page, size):
    """
    List active tasks, soonest due first.

    Path params are parsed by hand so negative values reach validation
    instead of failing the route match.
    """
    page_num = parse_page_value(page)
    page_size = parse_page_value(size)

    db = get_db()
    try:
        result = TaskService(db).list_tasks(page_num, page_size)
        return jsonify(result.to_dict())
    finally:
        db.close()


if __name__ == '__main__':
    app.run(debug=True, host='127.0.0.1', port=5000)
