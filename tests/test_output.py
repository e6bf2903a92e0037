from dataclasses import dataclass

import numpy as np
import pytest

from discrim.outputs._base import ExecutionMetadata, Output, set_metadata


@dataclass
class MockOutput(Output):
    test1: int
    test2: bool
    test3: str


@set_metadata
def mock_metric(arg1: int, arg2: bool, arg3: str = "mock_default") -> MockOutput:
    return MockOutput(arg1, arg2, arg3)


@pytest.mark.required
class TestOutputMetadata:
    def test_output_metadata_str(self):
        output = mock_metric(1, True, "value")
        assert str(output) == "{'test1': 1, 'test2': True, 'test3': 'value'}"

    def test_output_metadata_repr(self):
        output = mock_metric(1, True, "value")
        assert "MockOutput(test1=1" in repr(output)

    def test_output_metadata_data(self):
        output_dict = mock_metric(1, True, "value").data()
        assert output_dict == {"test1": 1, "test2": True, "test3": "value"}

    def test_output_metadata_meta(self):
        output_meta = mock_metric(1, True, "value").meta()
        assert output_meta.name.endswith("test_output.mock_metric")
        assert output_meta.execution_time
        assert output_meta.execution_duration >= 0
        assert output_meta.arguments == {"arg1": 1, "arg2": True, "arg3": "value"}
        assert output_meta.version

    def test_output_default_args_kwargs(self):
        output = mock_metric(1, arg2=False)
        assert output.data() == {"test1": 1, "test2": False, "test3": "mock_default"}
        assert output.meta().arguments == {"arg1": 1, "arg2": False, "arg3": "mock_default"}

    def test_output_array_argument(self):
        @set_metadata
        def mock_array_metric(data: np.ndarray, ids: list) -> MockOutput:
            return MockOutput(len(data), True, "array")

        output_meta = mock_array_metric(np.zeros((3, 2)), [1, 1, 2]).meta()
        assert output_meta.arguments == {"data": "ndarray: shape=(3, 2)", "ids": "list: len=3"}

    def test_metadata_fields(self):
        fields = set(ExecutionMetadata.__dataclass_fields__)
        assert fields == {"name", "execution_time", "execution_duration", "arguments", "version"}

    def test_empty_meta(self):
        output = MockOutput(1, True, "value")
        assert output.meta() == ExecutionMetadata.empty()

    def test_logs_execution(self, caplog):
        with caplog.at_level("INFO"):
            mock_metric(1, True, "value")
        assert ">>> Executing" in caplog.text
        assert ">>> Completed" in caplog.text
        assert "state=" not in caplog.text
