"""
Pydantic schemas for AKHQ tool parameters.

Each model describes the arguments one or more AKHQ endpoint tools accept.
Field names match AKHQ's own parameter names (``topicName``, ``connectId``),
since they double as URL placeholder and query parameter names.

Path parameters are required fields, query parameters are optional and
nullable, and request payloads live under ``body``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Request Bodies
# =============================================================================


class ConfigsBody(BaseModel):
    """Configuration map update."""

    configs: dict[str, Any] | None = None


class ConnectDefinitionBody(BaseModel):
    """Kafka Connect definition to create."""

    name: str | None = None
    configs: dict[str, Any] | None = None


class GroupOffset(BaseModel):
    """Consumer group offset for one topic partition."""

    topic: str | None = None
    partition: int | None = None
    offset: int | None = None


class KsqlStatementBody(BaseModel):
    """ksqlDB statement to execute."""

    sql: str | None = None


class KsqlQueryBody(BaseModel):
    """ksqlDB pull query."""

    sql: str | None = None
    properties: dict[str, Any] | None = None


class SchemaReference(BaseModel):
    name: str | None = None
    subject: str | None = None
    version: int | None = None


class SchemaBody(BaseModel):
    """Schema registry subject definition."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    subject: str
    version: int
    compatibilityLevel: str | None = None
    schema_: str | None = Field(None, alias="schema")
    schemaType: str | None = None
    references: list[SchemaReference] | None = None
    exception: str | None = None


class TopicCreateBody(BaseModel):
    """Topic to create."""

    name: str | None = None
    partition: int | None = None
    replication: int | None = None
    configs: dict[str, Any] | None = None


class RecordHeader(BaseModel):
    key: str
    value: str


class ProduceRecordBody(BaseModel):
    """Record(s) to produce to a topic."""

    value: str | None = None
    key: str | None = None
    partition: int | None = None
    timestamp: str | None = None
    headers: list[RecordHeader] | None = None
    keySchema: str | None = None
    valueSchema: str | None = None
    multiMessage: bool | None = None
    keyValueSeparator: str | None = None


class DeleteRecordBody(BaseModel):
    """Tombstone to write for a key."""

    partition: int | None = None
    key: str | None = None


class CopyOffset(BaseModel):
    """Starting offset of one partition when copying a topic."""

    partition: int | None = None
    offset: int | None = None


# =============================================================================
# Instance-Level Parameters
# =============================================================================


class NoParams(BaseModel):
    """Tools that take no arguments."""


class ClusterParams(BaseModel):
    cluster: str


class SearchParams(ClusterParams):
    search: str | None = None


class PagedSearchParams(SearchParams):
    page: int | None = None


class AclsByPrincipalParams(ClusterParams):
    principal: str
    resourceType: str | None = None


# =============================================================================
# Kafka Connect
# =============================================================================


class ConnectParams(ClusterParams):
    connectId: str


class ConnectListParams(ConnectParams):
    search: str | None = None
    page: int | None = None


class ConnectCreateParams(ConnectParams):
    body: ConnectDefinitionBody


class ConnectPluginParams(ConnectParams):
    type: str


class ConnectPluginValidateParams(ConnectPluginParams):
    body: ConfigsBody


class ConnectDefinitionParams(ConnectParams):
    name: str


class ConnectConfigsUpdateParams(ConnectDefinitionParams):
    body: ConfigsBody


class ConnectTaskParams(ConnectDefinitionParams):
    taskId: int


# =============================================================================
# Consumer Groups
# =============================================================================


class GroupTopicsParams(ClusterParams):
    topics: list[str] | None = None


class GroupParams(ClusterParams):
    groupName: str


class GroupOffsetsUpdateParams(GroupParams):
    body: list[GroupOffset]


class GroupOffsetsStartParams(GroupParams):
    timestamp: str


class GroupTopicParams(GroupParams):
    topicName: str


# =============================================================================
# ksqlDB
# =============================================================================


class KsqlDbParams(ClusterParams):
    ksqlDbId: str


class KsqlDbListParams(KsqlDbParams):
    search: str | None = None
    page: int | None = None


class KsqlDbExecuteParams(KsqlDbParams):
    body: KsqlStatementBody


class KsqlDbPullParams(KsqlDbParams):
    body: KsqlQueryBody


# =============================================================================
# Nodes
# =============================================================================


class NodeParams(ClusterParams):
    nodeId: int


class NodeConfigsUpdateParams(NodeParams):
    body: ConfigsBody


# =============================================================================
# Schema Registry
# =============================================================================


class SchemaCreateParams(ClusterParams):
    body: SchemaBody


class SchemaByIdParams(BaseModel):
    cluster: str = Field(..., description="- The cluster name")
    id: int = Field(..., description="- The schema id")
    topic: str | None = Field(None, description="- (Optional) The topic name")


class SchemaTopicParams(ClusterParams):
    topic: str


class SubjectParams(ClusterParams):
    subject: str


class SchemaUpdateParams(SubjectParams):
    body: SchemaBody


class SubjectVersionParams(SubjectParams):
    version: int


# =============================================================================
# Topics
# =============================================================================


class TailParams(ClusterParams):
    topics: list[str]
    search: str | None = None
    after: list[str] | None = None


class TopicListParams(SearchParams):
    show: str | None = None
    page: int | None = None
    uiPageSize: int | None = None


class TopicCreateParams(ClusterParams):
    body: TopicCreateBody


class TopicsParams(ClusterParams):
    topics: list[str]


class TopicNameListParams(ClusterParams):
    show: str | None = None


class TopicParams(ClusterParams):
    topicName: str


class TopicConfigsUpdateParams(TopicParams):
    body: ConfigsBody


class TopicDataQueryParams(TopicParams):
    """Filters shared by the read, download and search data endpoints."""

    after: str | None = None
    partition: int | None = None
    sort: str | None = None
    timestamp: str | None = None
    endTimestamp: str | None = None
    searchByKey: str | None = None
    searchByValue: str | None = None
    searchByHeaderKey: str | None = None
    searchByHeaderValue: str | None = None
    searchByKeySubject: str | None = None
    searchByValueSubject: str | None = None


class TopicProduceParams(TopicParams):
    body: ProduceRecordBody


class TopicDataDeleteParams(TopicParams):
    body: DeleteRecordBody


class RecordParams(TopicParams):
    partition: int
    offset: int


class TopicOffsetsStartParams(TopicParams):
    timestamp: str | None = None


class TopicPartitionsUpdateParams(TopicParams):
    body: dict[str, Any]


class TopicCopyParams(BaseModel):
    fromCluster: str
    fromTopicName: str
    toCluster: str
    toTopicName: str
    body: list[CopyOffset]
