import hashlib
import json

from vizshape.core.analysis import DataStructureAnalysis
from vizshape.core.snapshot import analysis_to_dict


def analysis_fingerprint(analysis: DataStructureAnalysis) -> str:
    content = json.dumps(analysis_to_dict(analysis), sort_keys=True)
    return hashlib.sha256(content.encode()).hexdigest()
