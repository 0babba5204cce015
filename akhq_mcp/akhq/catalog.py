"""
AKHQ endpoint catalog.

Every AKHQ API operation the adapter exposes, as EndpointOperation records.
Order matters: tools are registered, and listed to the client, in the order
they appear here.

Usage:
    tools = build_tools(client)
    register_tools(registry, tools)
"""

from __future__ import annotations

from pydantic import BaseModel

from akhq_mcp.akhq.schemas import (
    AclsByPrincipalParams,
    ClusterParams,
    ConnectConfigsUpdateParams,
    ConnectCreateParams,
    ConnectDefinitionParams,
    ConnectListParams,
    ConnectParams,
    ConnectPluginParams,
    ConnectPluginValidateParams,
    ConnectTaskParams,
    GroupOffsetsStartParams,
    GroupOffsetsUpdateParams,
    GroupParams,
    GroupTopicParams,
    GroupTopicsParams,
    KsqlDbExecuteParams,
    KsqlDbListParams,
    KsqlDbParams,
    KsqlDbPullParams,
    NodeConfigsUpdateParams,
    NodeParams,
    NoParams,
    PagedSearchParams,
    RecordParams,
    SchemaByIdParams,
    SchemaCreateParams,
    SchemaTopicParams,
    SchemaUpdateParams,
    SearchParams,
    SubjectParams,
    SubjectVersionParams,
    TailParams,
    TopicConfigsUpdateParams,
    TopicCopyParams,
    TopicCreateParams,
    TopicDataDeleteParams,
    TopicDataQueryParams,
    TopicListParams,
    TopicNameListParams,
    TopicOffsetsStartParams,
    TopicParams,
    TopicPartitionsUpdateParams,
    TopicProduceParams,
    TopicsParams,
)
from akhq_mcp.client import AkhqClient
from akhq_mcp.tools.endpoint import EndpointOperation, EndpointTool


def _op(
    name: str,
    method: str,
    path: str,
    params_model: type[BaseModel],
    description: str,
) -> EndpointOperation:
    return EndpointOperation(
        name=name,
        description=description,
        method=method,
        path=path,
        params_model=params_model,
    )


_SCHEMA_BY_ID_DESCRIPTION = (
    "Find a subject by the schema id In case of several subjects matching the "
    "schema id, we use the topic name to get the most relevant subject that "
    "matches the topic name (TopicNameStrategy). If there is no topic or if the "
    "topic doesn't match any subject, return the first subject that matches the "
    "schema id."
)


AKHQ_OPERATIONS: tuple[EndpointOperation, ...] = (
    # Instance
    _op("get_auths", "GET", "/api/auths", NoParams,
        "Get all auth details for current instance"),
    _op("get_cluster", "GET", "/api/cluster", NoParams,
        "Get all cluster for current instance"),
    _op("get_me", "GET", "/api/me", NoParams,
        "Get current user"),
    _op("get_topic_defaults-configs", "GET", "/api/topic/defaults-configs", NoParams,
        "Get default topic configuration"),
    # ACLs
    _op("get_acls", "GET", "/api/{cluster}/acls", SearchParams,
        "List all acls"),
    _op("get_acls_by_principal", "GET", "/api/{cluster}/acls/{principal}", AclsByPrincipalParams,
        "Get acls for a principal"),
    # Kafka Connect
    _op("get_connect_by_connectId", "GET", "/api/{cluster}/connect/{connectId}", ConnectListParams,
        "List all connect definitions"),
    _op("post_connect_by_connectId", "POST", "/api/{cluster}/connect/{connectId}", ConnectCreateParams,
        "Create a new connect definition"),
    _op("get_connect_plugins", "GET", "/api/{cluster}/connect/{connectId}/plugins", ConnectParams,
        "List all connect plugins"),
    _op("get_connect_plugins_by_type", "GET",
        "/api/{cluster}/connect/{connectId}/plugins/{type}", ConnectPluginParams,
        "Retrieve a connect plugin"),
    _op("put_connect_plugins_validate", "PUT",
        "/api/{cluster}/connect/{connectId}/plugins/{type}/validate", ConnectPluginValidateParams,
        "Validate plugin configs"),
    _op("get_connect_by_connectId_name", "GET",
        "/api/{cluster}/connect/{connectId}/{name}", ConnectDefinitionParams,
        "Retrieve a connect definition"),
    _op("delete_connect_by_connectId_name", "DELETE",
        "/api/{cluster}/connect/{connectId}/{name}", ConnectDefinitionParams,
        "Delete a connect definition"),
    _op("get_connect_configs", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/configs", ConnectDefinitionParams,
        "Retrieve a connect config"),
    _op("post_connect_configs", "POST",
        "/api/{cluster}/connect/{connectId}/{name}/configs", ConnectConfigsUpdateParams,
        "Update a connect definition config"),
    _op("get_connect_pause", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/pause", ConnectDefinitionParams,
        "Pause a connect definition"),
    _op("get_connect_restart", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/restart", ConnectDefinitionParams,
        "Restart a connect definition"),
    _op("get_connect_resume", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/resume", ConnectDefinitionParams,
        "Resume a connect definition"),
    _op("get_connect_tasks", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/tasks", ConnectDefinitionParams,
        "Retrieve a connect task"),
    _op("get_connect_tasks_restart", "GET",
        "/api/{cluster}/connect/{connectId}/{name}/tasks/{taskId}/restart", ConnectTaskParams,
        "Restart a connect task"),
    # Consumer groups
    _op("get_group", "GET", "/api/{cluster}/group", PagedSearchParams,
        "List all consumer groups"),
    _op("get_group_topics", "GET", "/api/{cluster}/group/topics", GroupTopicsParams,
        "Retrieve consumer group for list of topics"),
    _op("get_group_by_groupName", "GET", "/api/{cluster}/group/{groupName}", GroupParams,
        "Retrieve a consumer group"),
    _op("delete_group_by_groupName", "DELETE", "/api/{cluster}/group/{groupName}", GroupParams,
        "Delete a consumer group"),
    _op("get_group_acls", "GET", "/api/{cluster}/group/{groupName}/acls", GroupParams,
        "Retrieve a consumer group acls"),
    _op("get_group_members", "GET", "/api/{cluster}/group/{groupName}/members", GroupParams,
        "Retrieve a consumer group members"),
    _op("get_group_offsets", "GET", "/api/{cluster}/group/{groupName}/offsets", GroupParams,
        "Retrieve a consumer group offsets"),
    _op("post_group_offsets", "POST",
        "/api/{cluster}/group/{groupName}/offsets", GroupOffsetsUpdateParams,
        "Update consumer group offsets"),
    _op("get_group_offsets_start", "GET",
        "/api/{cluster}/group/{groupName}/offsets/start", GroupOffsetsStartParams,
        "Retrive consumer group offsets by timestamp"),
    _op("delete_group_topic_by_topicName", "DELETE",
        "/api/{cluster}/group/{groupName}/topic/{topicName}", GroupTopicParams,
        "Delete group offsets of given topic"),
    # ksqlDB
    _op("put_ksqldb_execute", "PUT", "/api/{cluster}/ksqldb/{ksqlDbId}/execute", KsqlDbExecuteParams,
        "Execute a statement"),
    _op("get_ksqldb_info", "GET", "/api/{cluster}/ksqldb/{ksqlDbId}/info", KsqlDbParams,
        "Retrieve server info"),
    _op("get_ksqldb_queries", "GET", "/api/{cluster}/ksqldb/{ksqlDbId}/queries", KsqlDbListParams,
        "List all queries"),
    _op("put_ksqldb_queries_pull", "PUT",
        "/api/{cluster}/ksqldb/{ksqlDbId}/queries/pull", KsqlDbPullParams,
        "Execute a query"),
    _op("get_ksqldb_streams", "GET", "/api/{cluster}/ksqldb/{ksqlDbId}/streams", KsqlDbListParams,
        "List all streams"),
    _op("get_ksqldb_tables", "GET", "/api/{cluster}/ksqldb/{ksqlDbId}/tables", KsqlDbListParams,
        "List all tables"),
    # Nodes
    _op("get_node", "GET", "/api/{cluster}/node", ClusterParams,
        "List all nodes"),
    _op("get_node_partitions", "GET", "/api/{cluster}/node/partitions", ClusterParams,
        "partition counts"),
    _op("get_node_by_nodeId", "GET", "/api/{cluster}/node/{nodeId}", NodeParams,
        "Retrieve a nodes"),
    _op("get_node_configs", "GET", "/api/{cluster}/node/{nodeId}/configs", NodeParams,
        "List all configs for a node"),
    _op("post_node_configs", "POST", "/api/{cluster}/node/{nodeId}/configs", NodeConfigsUpdateParams,
        "Update configs for a node"),
    _op("get_node_logs", "GET", "/api/{cluster}/node/{nodeId}/logs", NodeParams,
        "List all logs for a node"),
    # Schema registry
    _op("get_schema", "GET", "/api/{cluster}/schema", PagedSearchParams,
        "List all schemas"),
    _op("post_schema", "POST", "/api/{cluster}/schema", SchemaCreateParams,
        "Create a new schema"),
    _op("get_schema_id_by_id", "GET", "/api/{cluster}/schema/id/{id}", SchemaByIdParams,
        _SCHEMA_BY_ID_DESCRIPTION),
    _op("get_schema_topic_by_topic", "GET", "/api/{cluster}/schema/topic/{topic}", SchemaTopicParams,
        "List all schemas prefered schemas for this topic"),
    _op("get_schema_by_subject", "GET", "/api/{cluster}/schema/{subject}", SubjectParams,
        "Retrieve a schema"),
    _op("post_schema_by_subject", "POST", "/api/{cluster}/schema/{subject}", SchemaUpdateParams,
        "Update a schema"),
    _op("delete_schema_by_subject", "DELETE", "/api/{cluster}/schema/{subject}", SubjectParams,
        "Delete a schema"),
    _op("get_schema_version", "GET", "/api/{cluster}/schema/{subject}/version", SubjectParams,
        "List all version for a schema"),
    _op("delete_schema_version_by_version", "DELETE",
        "/api/{cluster}/schema/{subject}/version/{version}", SubjectVersionParams,
        "Delete a version for a schema"),
    _op("get_schemas", "GET", "/api/{cluster}/schemas", ClusterParams,
        "List all schemas"),
    # Tail
    _op("get_tail_sse", "GET", "/api/{cluster}/tail/sse", TailParams,
        "Tail for data on multiple topic"),
    # Topics
    _op("get_topic", "GET", "/api/{cluster}/topic", TopicListParams,
        "List all topics"),
    _op("post_topic", "POST", "/api/{cluster}/topic", TopicCreateParams,
        "Create a topic"),
    _op("get_topic_last-record", "GET", "/api/{cluster}/topic/last-record", TopicsParams,
        "Retrieve the last record for a list of topics"),
    _op("get_topic_name", "GET", "/api/{cluster}/topic/name", TopicNameListParams,
        "List all topics name"),
    _op("get_topic_by_topicName", "GET", "/api/{cluster}/topic/{topicName}", TopicParams,
        "Retrieve a topic"),
    _op("delete_topic_by_topicName", "DELETE", "/api/{cluster}/topic/{topicName}", TopicParams,
        "Delete a topic"),
    _op("get_topic_acls", "GET", "/api/{cluster}/topic/{topicName}/acls", TopicParams,
        "List all acls from a topic"),
    _op("get_topic_configs", "GET", "/api/{cluster}/topic/{topicName}/configs", TopicParams,
        "List all configs from a topic"),
    _op("post_topic_configs", "POST",
        "/api/{cluster}/topic/{topicName}/configs", TopicConfigsUpdateParams,
        "Update configs from a topic"),
    # Topic data
    _op("get_topic_data", "GET", "/api/{cluster}/topic/{topicName}/data", TopicDataQueryParams,
        "Read datas from a topic"),
    _op("post_topic_data", "POST", "/api/{cluster}/topic/{topicName}/data", TopicProduceParams,
        "Produce data to a topic"),
    _op("delete_topic_data", "DELETE", "/api/{cluster}/topic/{topicName}/data", TopicDataDeleteParams,
        "Delete data from a topic by key"),
    _op("get_topic_data_download", "GET",
        "/api/{cluster}/topic/{topicName}/data/download", TopicDataQueryParams,
        "Download data for a topic"),
    _op("delete_topic_data_empty", "DELETE",
        "/api/{cluster}/topic/{topicName}/data/empty", TopicParams,
        "Empty data from a topic"),
    _op("get_topic_data_record_by_partition_offset", "GET",
        "/api/{cluster}/topic/{topicName}/data/record/{partition}/{offset}", RecordParams,
        "Get a single record by partition and offset"),
    _op("get_topic_data_search", "GET",
        "/api/{cluster}/topic/{topicName}/data/search", TopicDataQueryParams,
        "Search for data for a topic"),
    _op("get_topic_groups", "GET", "/api/{cluster}/topic/{topicName}/groups", TopicParams,
        "List all consumer groups from a topic"),
    _op("get_topic_logs", "GET", "/api/{cluster}/topic/{topicName}/logs", TopicParams,
        "List all logs from a topic"),
    _op("get_topic_offsets_start", "GET",
        "/api/{cluster}/topic/{topicName}/offsets/start", TopicOffsetsStartParams,
        "Get topic partition offsets by timestamp"),
    _op("get_topic_partitions", "GET", "/api/{cluster}/topic/{topicName}/partitions", TopicParams,
        "List all partition from a topic"),
    _op("post_topic_partitions", "POST",
        "/api/{cluster}/topic/{topicName}/partitions", TopicPartitionsUpdateParams,
        "Increase partition for a topic"),
    # UI
    _op("get_ui-options", "GET", "/api/{cluster}/ui-options", ClusterParams,
        "Get ui options for cluster"),
    # Copy
    _op("post_topic_copy_topic_by_toTopicName", "POST",
        "/api/{fromCluster}/topic/{fromTopicName}/copy/{toCluster}/topic/{toTopicName}",
        TopicCopyParams,
        "Copy from a topic to another topic"),
)


def build_tools(client: AkhqClient) -> list[EndpointTool]:
    """Create one EndpointTool per catalog entry, all sharing ``client``."""
    return [EndpointTool(operation, client) for operation in AKHQ_OPERATIONS]
