from maxvalues.logtools.dict import LoggedDict
from maxvalues.logtools.infrastructure import (create_logging_infrastructure,
                                               finalize_logging_infrastructure,
                                               create_logfile_name)
