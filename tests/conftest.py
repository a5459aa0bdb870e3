import json

import pytest


@pytest.fixture
def mock_input_data(tmp_path):
    test_cases = [
        {
            "name": "short-answer",
            "prompt": "Explain machine learning",
            "response": "Machine learning is a field of AI.",
            "metadata": {"temperature": 0.7},
        },
        {
            "name": "list-answer",
            "prompt": "List three fruits",
            "response": "Fruits:\n- apple\n- banana\n- cherry",
            "metadata": {"temperature": 1.2, "top_p": 0.9},
        },
    ]
    file_path = tmp_path / "input_data.jsonl"
    file_path.write_text("\n".join(json.dumps(case) for case in test_cases) + "\n")
    return file_path
