"""
Enumerations for ChatterJoy data models.
"""

from enum import Enum


class PipelineStage(str, Enum):
    """
    Stages of the reply pipeline.
    
    Each stage is backed by exactly one provider call.
    """
    
    EMOTION = "emotion"
    REPLY = "reply"


class FailureKind(str, Enum):
    """
    Classification of a failed provider call.
    
    HTTP_STATUS carries the upstream status code verbatim; the others are
    mapped to gateway statuses by the provider client.
    """
    
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    TIMEOUT = "timeout"
    CONNECTION = "connection"
