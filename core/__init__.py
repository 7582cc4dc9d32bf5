# core package: configuration, logging, schemas, HTTP client and the tool registry
