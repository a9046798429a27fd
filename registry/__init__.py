"""Entity registry: delegated-type records (Entity over Business / Person) with identity resolution."""
