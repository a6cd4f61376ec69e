# hubsubjects

Builds and parses the NATS subject names used by a variable data hub:
providers publishing variable changes, consumers reading and writing
variables, and the registry that keeps track of provider definitions.

Everything lives in the module `hubsubjects.subjects`.

## Installation

```
pip install hubsubjects
```

## Building subjects

Every subject starts with the version prefix `v1` and the location prefix
`loc`, available as `VERSION_PREFIX` and `LOCATION_PREFIX`.

```python
from hubsubjects.subjects import (
    vars_changed_event,
    read_variables_query,
    write_variables_command,
    provider_changed_event,
    registry_provider_definition_read_query,
    registry_provider_definition_changed_event,
    registry_providers_read_query,
    registry_providers_changed_event,
    registry_state_changed_event,
)

vars_changed_event("my_provider")
# 'v1.loc.my_provider.vars.evt.changed'

read_variables_query("my_provider")
# 'v1.loc.my_provider.vars.qry.read'

write_variables_command("my_provider")
# 'v1.loc.my_provider.vars.cmd.write'

provider_changed_event("my_provider")
# 'v1.loc.my_provider.def.evt.changed'

registry_provider_definition_read_query("my_provider")
# 'v1.loc.registry.providers.my_provider.def.qry.read'

registry_provider_definition_changed_event("my_provider")
# 'v1.loc.registry.providers.my_provider.def.evt.changed'

registry_providers_read_query()
# 'v1.loc.registry.providers.qry.read'

registry_providers_changed_event()
# 'v1.loc.registry.providers.evt.changed'

registry_state_changed_event()
# 'v1.loc.registry.state.evt.changed'
```

The provider id is inserted as given; passing `"*"` gives a wildcard
subject suitable for subscribing to all providers.

## Parsing subjects

```python
from hubsubjects.subjects import (
    NoProviderInSubjectError,
    get_provider_id_from_subject,
    get_provider_name_from_subject,
)

get_provider_name_from_subject("v1.loc.provider1.vars.qry.read")
# 'provider1'

get_provider_name_from_subject("v1.loc")
# None

get_provider_id_from_subject("v1.loc.registry.providers.provider1.def.qry.read")
# 'provider1'

try:
    get_provider_id_from_subject("v1.loc")
except NoProviderInSubjectError as err:
    print(err.subject)
```

Both functions split the subject on `.` and take the provider from the
third part, or from the fifth part for registry subjects.

- `get_provider_name_from_subject` treats any subject containing the text
  `registry` as a registry subject. It returns `None` when the subject has
  fewer than three parts, when the provider part is missing, or when it is
  empty.
- `get_provider_id_from_subject` treats a subject as a registry subject only
  when it begins `v1.loc.registry.providers` (any first two parts, then
  `registry` and `providers`). It raises `NoProviderInSubjectError`, a
  subclass of `ValueError` carrying the offending subject in its `subject`
  attribute, when the provider part is missing or empty.

## What this package does not do

It only builds and parses subject strings. It does not connect to a
message server, authenticate, publish or subscribe, and it does not encode
or decode message payloads.

## Running the tests

```
pip install -e ".[test]"
pytest
```